# topmark:header:start
#
#   project      : DiagReport
#   file         : position.py
#   file_relpath : src/diagreport/model/position.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source positions attached to messages and syntax-tree nodes.

Lines and columns are 1-indexed. A message place is either absent, a single
`Point`, or a `Position` range.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True, slots=True)
class Point:
    """A single place in a file."""

    line: int | None = None
    column: int | None = None
    offset: int | None = None


@dataclass(frozen=True, slots=True)
class Position:
    """A range between two points in a file."""

    start: Point
    end: Point

    @property
    def has_end(self) -> bool:
        """Return True if the end point carries both a line and a column."""
        return bool(self.end.line) and bool(self.end.column)


Place: TypeAlias = "Point | Position"


def start_of(place: Place | None) -> Point | None:
    """Return the start point of a place (the point itself for a `Point`)."""
    if place is None:
        return None
    if isinstance(place, Position):
        return place.start
    return place


def _index(value: int | None) -> int:
    # Missing, zero, or non-integer values render as line/column 1.
    if isinstance(value, int) and not isinstance(value, bool) and value:
        return value
    return 1


def stringify_point(point: Point) -> str:
    """Render a point as ``line:column``."""
    return f"{_index(point.line)}:{_index(point.column)}"


def stringify_position(value: Place | None) -> str:
    """Render a place for display.

    Args:
        value: Nothing, a point, or a range.

    Returns:
        ``""`` for nothing, ``line:column`` for a point, and
        ``line:column-line:column`` for a range.
    """
    if value is None:
        return ""
    if isinstance(value, Position):
        return f"{stringify_point(value.start)}-{stringify_point(value.end)}"
    return stringify_point(value)


def display_place(place: Place | None) -> str:
    """Render a message place, collapsing ranges without a usable end to their start."""
    if isinstance(place, Position) and not place.has_end:
        return stringify_position(place.start)
    return stringify_position(place)
