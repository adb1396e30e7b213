# topmark:header:start
#
#   project      : DiagReport
#   file         : message.py
#   file_relpath : src/diagreport/model/message.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Diagnostic messages attached to virtual files.

`VFileMessage` is an `Exception` so that `VFile.fail()` can raise it, the same
way a tool aborts processing a file. Everything the reporter needs is
normalized when the message is constructed:

- the tri-state `fatal` flag becomes a `Severity`;
- an exception passed as reason yields the reason text and a stack;
- an ``"source:rule"`` origin is split into `source` and `rule_id`;
- the raw `cause` is resolved into a `Cause` variant.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from diagreport.model.cause import format_exception_stack, resolve_cause
from diagreport.model.position import Point, Position, start_of
from diagreport.model.severity import Severity

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagreport.model.cause import Cause
    from diagreport.model.position import Place


@dataclass(frozen=True, slots=True)
class Ancestor:
    """A syntax-tree node surrounding a message, used for verbose traces.

    Attributes:
        type: Node type (e.g. ``"paragraph"``, ``"element"``).
        name: Name of named nodes (e.g. JSX-like elements).
        tag_name: Tag name of element nodes.
        position: Where the node sits in the file, if known.
    """

    type: str
    name: str | None = None
    tag_name: str | None = None
    position: Position | None = None

    @property
    def label(self) -> str:
        """Return the display label: ``<tag>`` for elements, otherwise the node type."""
        if self.tag_name:
            return f"<{self.tag_name}>"
        if self.name:
            return f"<{self.name}>"
        return self.type


def split_origin(origin: str) -> tuple[str | None, str | None]:
    """Split an origin into ``(source, rule_id)``.

    ``"remark-lint:no-tabs"`` gives ``("remark-lint", "no-tabs")``; an origin
    without a colon is a bare rule id.
    """
    source, sep, rule_id = origin.partition(":")
    if not sep:
        return None, origin or None
    return source or None, rule_id or None


class VFileMessage(Exception):
    """A diagnostic message: a reason at a place in a file, with a severity.

    Args:
        reason: Reason text, or an exception whose text and stack are used.
        place: A point, a range, or a node (whose position is used and which
            becomes the trace when no `ancestors` are given).
        origin: ``"source:rule"`` or a bare rule id.
        fatal: Tri-state severity flag (True: error, False: warning, None: info).
        severity: Explicit severity; takes precedence over `fatal`.
        rule_id: Rule identifier; takes precedence over `origin`.
        source: Producing tool or plugin; takes precedence over `origin`.
        note: Free text shown in verbose reports.
        url: Link to documentation shown in verbose reports.
        cause: Underlying cause (message, exception, error-like, primitive).
        ancestors: Enclosing nodes, root first.
        file: Path of the file the message belongs to.
        stack: Multi-line rendering preferred over `reason` when present.
    """

    def __init__(
        self,
        reason: str | BaseException,
        place: Point | Position | Ancestor | None = None,
        origin: str | None = None,
        *,
        fatal: bool | None = None,
        severity: Severity | None = None,
        rule_id: str | None = None,
        source: str | None = None,
        note: str | None = None,
        url: str | None = None,
        cause: object = None,
        ancestors: Iterable[Ancestor] = (),
        file: str | None = None,
        stack: str | None = None,
    ) -> None:
        if isinstance(reason, BaseException):
            if stack is None:
                stack = format_exception_stack(reason)
            reason = str(reason)
        super().__init__(reason)

        ancestors = tuple(ancestors)
        if isinstance(place, Ancestor):
            if not ancestors:
                ancestors = (place,)
            place = place.position

        origin_source, origin_rule = split_origin(origin) if origin else (None, None)

        self.reason: str = reason
        self.severity: Severity = severity if severity is not None else Severity.from_fatal(fatal)
        self.place: Place | None = place
        self.rule_id: str | None = rule_id if rule_id is not None else origin_rule
        self.source: str | None = source if source is not None else origin_source
        self.note: str | None = note
        self.url: str | None = url
        self.stack: str | None = stack
        self.cause: Cause | None = resolve_cause(cause)
        self.ancestors: tuple[Ancestor, ...] = ancestors
        self.file: str | None = file

    @property
    def start(self) -> Point | None:
        """Return the start point of the message place, if any."""
        return start_of(self.place)

    @property
    def line(self) -> int | None:
        """Return the start line, if known."""
        start = self.start
        return start.line if start else None

    @property
    def column(self) -> int | None:
        """Return the start column, if known."""
        start = self.start
        return start.column if start else None

    @property
    def fatal(self) -> bool | None:
        """Return the tri-state `fatal` flag derived from the severity."""
        return self.severity.fatal

    @property
    def message(self) -> str:
        """Return the reason text (alias kept for error-like interop)."""
        return self.reason

    @property
    def display_reason(self) -> str:
        """Return the text shown in reports: the stack when present, else the reason."""
        return self.stack or self.reason

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self.reason!r}, place={self.place!r}, "
            f"severity={self.severity.value!r}, rule_id={self.rule_id!r})"
        )
