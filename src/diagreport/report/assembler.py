# topmark:header:start
#
#   project      : DiagReport
#   file         : assembler.py
#   file_relpath : src/diagreport/report/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report assembler.

`assemble()` walks the files in path order and builds one `FileBlock` per
displayed file; `format_report()` flattens the blocks into serializer lines,
inserting blank separators and the summary.

Filtering rules:
    - messages are sorted per file (stable, by line then column) on a copy;
    - `silent` keeps only fatal messages;
    - under `quiet` (or `silent`), files without surviving messages are
      omitted entirely, unless they were stored (their `written` status
      is always reported).
"""

from __future__ import annotations

import operator
from functools import reduce
from typing import TYPE_CHECKING

from diagreport.config.logging import get_logger
from diagreport.model.severity import Severity
from diagreport.model.statistics import Statistics, compute_statistics
from diagreport.report.files import build_file_header
from diagreport.report.messages import build_message_row, sort_messages
from diagreport.report.rows import FileBlock, FileRow, Report
from diagreport.report.summary import build_summary

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.file import VFile
    from diagreport.report.options import ReportState
    from diagreport.report.rows import Line


logger: DiagReportLogger = get_logger(__name__)


def sort_files(files: Sequence[VFile]) -> list[VFile]:
    """Return a new list of `files` in stable path order (path-less files first)."""
    return sorted(files, key=lambda file: file.path or "")


def build_block(file: VFile, state: ReportState) -> FileBlock | None:
    """Build the header and message rows of one file.

    Returns:
        The block, or None when the file is hidden by `quiet` / `silent`.
    """
    messages = sort_messages(file.messages)
    if state.silent:
        messages = [message for message in messages if message.severity is Severity.ERROR]

    if state.quiet and not messages and not file.stored:
        logger.trace("Hiding %s: no surviving messages", file.path)
        return None

    return FileBlock(
        header=FileRow(file=file, stats=compute_statistics(messages)),
        messages=tuple(
            build_message_row(message, state, value=file.value) for message in messages
        ),
    )


def assemble(files: Sequence[VFile], state: ReportState) -> Report:
    """Build the report structure for `files`.

    Args:
        files: Files to report on; neither the sequence nor the files are modified.
        state: The resolved report state.

    Returns:
        The displayed blocks and the counts over all surviving messages.
    """
    blocks: tuple[FileBlock, ...] = tuple(
        block for block in (build_block(file, state) for file in sort_files(files)) if block
    )
    stats: Statistics = reduce(
        operator.add, (block.header.stats for block in blocks), Statistics()
    )
    logger.debug(
        "Assembled %d of %d file(s), %d message(s)", len(blocks), len(files), stats.total
    )
    return Report(blocks=blocks, stats=stats)


def format_report(report: Report, state: ReportState) -> list[Line]:
    """Flatten an assembled report into serializer lines.

    A blank line separates a file's messages from the next header, and the
    summary (if any) from everything above it.
    """
    lines: list[Line] = []
    after_messages: bool = False

    for block in report.blocks:
        header: str = build_file_header(block.header.file, block.header.stats, state)
        if header:
            if after_messages:
                lines.append("")
            lines.append(header)
        after_messages = False

        for row in block.messages:
            lines.extend(row.lines())
            after_messages = True

    summary: str = build_summary(report.stats, state.chalk)
    if summary:
        lines.extend(["", summary])
    return lines
