# topmark:header:start
#
#   project      : DiagReport
#   file         : serializer.py
#   file_relpath : src/diagreport/report/serializer.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Column aligner and serializer.

Two passes over the line list: first measure the widest cell of every column
across all cell tuples, then render each tuple with every cell padded to its
column width plus two spaces. Plain string lines are not aligned.

Only the first line of a cell is aligned: whatever follows its first line
break is appended, break included and untouched, after the padded row. Padded
rows are stripped of trailing spaces; lines are joined with ``\\n`` and no
trailing newline is added.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagreport.rendering.width import split_first_line, string_width

if TYPE_CHECKING:
    from collections.abc import Sequence

    from diagreport.report.rows import Line

COLUMN_GAP: int = 2


def column_widths(lines: Sequence[Line]) -> list[int]:
    """Return the display width of the widest cell in each column."""
    sizes: list[int] = []
    for line in lines:
        if isinstance(line, str):
            continue
        for index, cell in enumerate(line):
            width: int = string_width(cell)
            if index < len(sizes):
                sizes[index] = max(sizes[index], width)
            else:
                sizes.append(width)
    return sizes


def render_cells(cells: Sequence[str], sizes: Sequence[int]) -> str:
    """Render one cell tuple padded to the given column widths.

    Cell text after a line break is kept verbatim at the end of the row.
    """
    padded: list[str] = []
    tails: list[str] = []
    for index, cell in enumerate(cells):
        head, tail = split_first_line(cell)
        padded.append(head + " " * (sizes[index] - string_width(head) + COLUMN_GAP))
        tails.append(tail)
    return "".join(padded).rstrip(" ") + "".join(tails)


def serialize(lines: Sequence[Line]) -> str:
    """Align and join report lines.

    Args:
        lines: Plain strings and cell tuples, in display order.

    Returns:
        The report text.
    """
    sizes: list[int] = column_widths(lines)
    return "\n".join(
        line.rstrip() if isinstance(line, str) else render_cells(line, sizes) for line in lines
    )
