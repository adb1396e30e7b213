# topmark:header:start
#
#   project      : DiagReport
#   file         : rows.py
#   file_relpath : src/diagreport/report/rows.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Intermediate row shapes between assembly and serialization.

The assembler produces `FileRow` and `MessageRow` objects; formatting turns
them into `Line` values (plain strings or cell tuples) that the serializer
aligns. None of these outlive a `reporter()` call.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from diagreport.model.file import VFile
    from diagreport.model.statistics import Statistics

# blank, place, label, reason, rule id, source
Cells: TypeAlias = "tuple[str, str, str, str, str, str]"

# A serializer input line: standalone text, or cells taking part in alignment.
Line: TypeAlias = "str | tuple[str, ...]"


@dataclass(frozen=True, slots=True)
class MessageRow:
    """One message, rendered.

    Attributes:
        cells: Aligned cells of the primary row.
        continuation: Unaligned rows following the primary row (verbose
            sections).
        excerpt: Unaligned source excerpt shown before the primary row.
    """

    cells: Cells
    continuation: tuple[str, ...] = ()
    excerpt: str | None = None

    def lines(self) -> list[Line]:
        """Return the serializer lines for this message, in display order."""
        out: list[Line] = []
        if self.excerpt is not None:
            out.append(self.excerpt)
        out.append(self.cells)
        out.extend(self.continuation)
        return out


@dataclass(frozen=True, slots=True)
class FileRow:
    """The header of one file, with counts for its surviving messages."""

    file: VFile
    stats: Statistics


@dataclass(frozen=True, slots=True)
class FileBlock:
    """A file header and its message rows."""

    header: FileRow
    messages: tuple[MessageRow, ...]


@dataclass(frozen=True, slots=True)
class Report:
    """The assembled, not yet serialized, report.

    Attributes:
        blocks: Displayed files in report order.
        stats: Counts over all surviving messages.
    """

    blocks: tuple[FileBlock, ...]
    stats: Statistics
