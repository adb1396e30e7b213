# topmark:header:start
#
#   project      : DiagReport
#   file         : __init__.py
#   file_relpath : src/diagreport/model/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Data consumed by the reporter: virtual files, messages, positions and counts.

Design:
    - Severity and cause shapes are normalized when a `VFileMessage` is built;
      the reporter only ever sees `Severity` members and `Cause` variants.
    - `Statistics` is an immutable fold over messages.
    - The reporter treats all of these as read-only snapshots.
"""

from __future__ import annotations

from diagreport.model.cause import (
    Cause,
    ErrorLike,
    NestedMessage,
    Primitive,
    Unknown,
    format_exception_stack,
    resolve_cause,
)
from diagreport.model.file import VFile
from diagreport.model.message import Ancestor, VFileMessage, split_origin
from diagreport.model.position import (
    Place,
    Point,
    Position,
    display_place,
    start_of,
    stringify_point,
    stringify_position,
)
from diagreport.model.severity import Severity
from diagreport.model.statistics import Statistics, compute_statistics

__all__ = [
    "Ancestor",
    "Cause",
    "ErrorLike",
    "NestedMessage",
    "Place",
    "Point",
    "Position",
    "Primitive",
    "Severity",
    "Statistics",
    "Unknown",
    "VFile",
    "VFileMessage",
    "compute_statistics",
    "display_place",
    "format_exception_stack",
    "resolve_cause",
    "split_origin",
    "start_of",
    "stringify_point",
    "stringify_position",
]
