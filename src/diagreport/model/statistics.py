# topmark:header:start
#
#   project      : DiagReport
#   file         : statistics.py
#   file_relpath : src/diagreport/model/statistics.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Per-severity message counts.

`Statistics` is an immutable aggregate; combine instances with ``+`` to fold
counts across files instead of mutating a shared accumulator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from diagreport.model.file import VFile
from diagreport.model.message import VFileMessage
from diagreport.model.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(frozen=True, slots=True)
class Statistics:
    """Aggregated counts for messages by severity."""

    fatal: int = 0
    warn: int = 0
    info: int = 0

    @property
    def total(self) -> int:
        """Return the total count of messages."""
        return self.fatal + self.warn + self.info

    def __add__(self, other: Statistics) -> Statistics:
        if not isinstance(other, Statistics):
            return NotImplemented
        return Statistics(
            fatal=self.fatal + other.fatal,
            warn=self.warn + other.warn,
            info=self.info + other.info,
        )


def _iter_messages(
    value: VFile | VFileMessage | Iterable[VFile | VFileMessage],
) -> Iterator[VFileMessage]:
    items: Iterable[VFile | VFileMessage] = (
        [value] if isinstance(value, (VFile, VFileMessage)) else value
    )
    for item in items:
        if isinstance(item, VFile):
            yield from item.messages
        else:
            yield item


def compute_statistics(
    value: VFile | VFileMessage | Iterable[VFile | VFileMessage],
) -> Statistics:
    """Return per-severity counts for a file, a message, or an iterable of either.

    Args:
        value: What to count; files contribute all of their messages.

    Returns:
        The aggregated counts.
    """
    severities: list[Severity] = [message.severity for message in _iter_messages(value)]
    return Statistics(
        fatal=sum(1 for s in severities if s is Severity.ERROR),
        warn=sum(1 for s in severities if s is Severity.WARNING),
        info=sum(1 for s in severities if s is Severity.INFO),
    )
