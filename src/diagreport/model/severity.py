# topmark:header:start
#
#   project      : DiagReport
#   file         : severity.py
#   file_relpath : src/diagreport/model/severity.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message severity.

Producers of diagnostics commonly encode severity as a tri-state `fatal`
flag (`True` → error, `False` → warning, `None` → info). That encoding is
converted to `Severity` once, when a message is created, and never travels
further.
"""

from __future__ import annotations

from diagreport.rendering.colored_enum import ColoredStrEnum


class Severity(ColoredStrEnum):
    """Severity of a diagnostic message, ordered ERROR > WARNING > INFO.

    The value is the label printed in the report's severity column. Warnings
    and infos share the yellow style.
    """

    ERROR = ("error", "red")
    WARNING = ("warning", "yellow")
    INFO = ("info", "yellow")

    @classmethod
    def from_fatal(cls, fatal: bool | None) -> Severity:
        """Map a tri-state `fatal` flag onto a severity."""
        if fatal is None:
            return cls.INFO
        return cls.ERROR if fatal else cls.WARNING

    @property
    def fatal(self) -> bool | None:
        """Return the tri-state `fatal` flag for interchange formats."""
        if self is Severity.INFO:
            return None
        return self is Severity.ERROR
