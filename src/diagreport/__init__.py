# topmark:header:start
#
#   project      : DiagReport
#   file         : __init__.py
#   file_relpath : src/diagreport/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagReport package.

DiagReport turns virtual files annotated with diagnostic messages into a
deterministic, column-aligned, optionally colorized text report with a
per-file header and an aggregate summary line.

Typical usage:
    ```python
    from diagreport import Point, VFile, reporter

    file = VFile("a.js")
    file.message("Warning!", Point(1, 1))
    print(reporter([file, VFile("b.js")], color=False))
    ```
"""

from __future__ import annotations

from diagreport.errors import DiagReportError, ReporterUsageError
from diagreport.model import (
    Ancestor,
    Point,
    Position,
    Severity,
    Statistics,
    VFile,
    VFileMessage,
    compute_statistics,
    stringify_position,
)
from diagreport.report import ReportOptions, reporter

__all__ = [
    "Ancestor",
    "DiagReportError",
    "Point",
    "Position",
    "ReportOptions",
    "ReporterUsageError",
    "Severity",
    "Statistics",
    "VFile",
    "VFileMessage",
    "compute_statistics",
    "reporter",
    "stringify_position",
]
