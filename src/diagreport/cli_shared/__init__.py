# topmark:header:start
#
#   project      : DiagReport
#   file         : __init__.py
#   file_relpath : src/diagreport/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free helpers shared by the CLI and the library entry point."""

from __future__ import annotations
