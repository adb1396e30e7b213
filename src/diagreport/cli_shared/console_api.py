# topmark:header:start
#
#   project      : DiagReport
#   file         : console_api.py
#   file_relpath : src/diagreport/cli_shared/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interface between the CLI command and its output streams.

Error classes only know this protocol, so they stay importable without a
concrete console.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """Sink for the report and for user-facing errors."""

    def report(self, text: str) -> None:
        """Write a rendered report."""
        ...

    def error(self, message: str) -> None:
        """Write an error message."""
        ...
