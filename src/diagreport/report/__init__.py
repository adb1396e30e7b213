# topmark:header:start
#
#   project      : DiagReport
#   file         : __init__.py
#   file_relpath : src/diagreport/report/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report engine: row construction, column alignment and summary.

Pipeline:
    - [`assembler`][diagreport.report.assembler]: orders and filters files and
      messages, builds header and message rows, folds statistics.
    - [`messages`][diagreport.report.messages] and
      [`files`][diagreport.report.files]: per-row rendering.
    - [`serializer`][diagreport.report.serializer]: two-pass measure-then-render
      column alignment.
    - [`summary`][diagreport.report.summary]: trailing aggregate line.
"""

from __future__ import annotations

from diagreport.report.api import reporter
from diagreport.report.options import ReportOptions, ReportState

__all__ = [
    "ReportOptions",
    "ReportState",
    "reporter",
]
