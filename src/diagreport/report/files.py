# topmark:header:start
#
#   project      : DiagReport
#   file         : files.py
#   file_relpath : src/diagreport/report/files.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""File header builder.

A header reads ``<label>[ > <stored path>][: <status>]``:

- the label is the origin path, the default name, or ``<stdin>``, underlined
  and colored by the file's worst status (red: errors, yellow: any messages,
  green: clean);
- the label is left out for an anonymous single file when no default name was
  given;
- the status is only shown for files without messages: ``written`` for stored
  files, ``no issues found`` otherwise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagreport.constants import DEFAULT_NAME

if TYPE_CHECKING:
    from yachalk import ChalkFactory

    from diagreport.model.file import VFile
    from diagreport.model.statistics import Statistics
    from diagreport.rendering.colored_enum import Colorizer
    from diagreport.report.options import ReportState


def status_style(stats: Statistics, chalk: ChalkFactory) -> Colorizer:
    """Return the underline style, built by `chalk`, encoding the worst status of a file."""
    if stats.fatal:
        return chalk.underline.red
    if stats.total:
        return chalk.underline.yellow
    return chalk.underline.green


def file_label(file: VFile, state: ReportState) -> str:
    """Return the plain label of a file, or ``""`` when it is suppressed."""
    if state.one_file and not state.default_name and file.origin is None:
        return ""
    return file.origin or state.default_name or DEFAULT_NAME


def build_file_header(file: VFile, stats: Statistics, state: ReportState) -> str:
    """Render the header line of a file.

    Args:
        file: The file.
        stats: Counts for the file's surviving messages.
        state: The resolved report state.

    Returns:
        The header text; empty when there is nothing to show.
    """
    left: str = file_label(file, state)
    if left:
        left = status_style(stats, state.chalk)(left)
        if file.moved:
            left += f" > {file.path}"

    right: str = ""
    if not stats.total:
        right = state.chalk.yellow("written") if file.stored else "no issues found"

    if left and right:
        return f"{left}: {right}"
    return left or right
