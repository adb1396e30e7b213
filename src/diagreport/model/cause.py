# topmark:header:start
#
#   project      : DiagReport
#   file         : cause.py
#   file_relpath : src/diagreport/model/cause.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Underlying causes attached to diagnostic messages.

A message's `cause` may be another message, an exception, an error-like
object or mapping (with `message` / `stack`), a primitive, or anything else.
`resolve_cause()` classifies the value once, when the message is created, into
one of the variants below so rendering never has to sniff shapes:

    * `NestedMessage`: the cause is itself a `VFileMessage`.
    * `ErrorLike`: exception or error-like value with a message, an optional
      stack, and an optional cause of its own.
    * `Primitive`: strings and numbers, shown through `str()`.
    * `Unknown`: neither a message nor a stack could be found.
"""

from __future__ import annotations

import traceback
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

from diagreport.config.logging import get_logger

if TYPE_CHECKING:
    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.message import VFileMessage


logger: DiagReportLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class NestedMessage:
    """A cause that is itself a diagnostic message."""

    message: VFileMessage


@dataclass(frozen=True, slots=True)
class ErrorLike:
    """An exception or error-like cause.

    Attributes:
        message: Human-readable message text.
        stack: Multi-line stack rendering, preferred over `message` when present.
        cause: The cause of this cause, if any.
    """

    message: str
    stack: str | None = None
    cause: Cause | None = None


@dataclass(frozen=True, slots=True)
class Primitive:
    """A scalar cause shown through its string form."""

    text: str


@dataclass(frozen=True, slots=True)
class Unknown:
    """A cause carrying neither a message nor a stack."""


Cause: TypeAlias = "NestedMessage | ErrorLike | Primitive | Unknown"


def format_exception_stack(exc: BaseException) -> str:
    """Render an exception as ``Type: message`` followed by its traceback frames.

    The exception line comes first so the first line of the result is a
    meaningful one-line reason; frames (when the exception was raised) follow.
    """
    head: str = "".join(traceback.format_exception_only(type(exc), exc)).rstrip()
    if exc.__traceback__ is None:
        return head
    frames: str = "".join(traceback.format_tb(exc.__traceback__)).rstrip()
    return f"{head}\n{frames}" if frames else head


def resolve_cause(value: object, *, _seen: frozenset[int] = frozenset()) -> Cause | None:
    """Classify a raw cause value.

    Args:
        value: The raw cause (message, exception, mapping, object, primitive, or None).

    Returns:
        The resolved cause variant, or None when there is no cause.
    """
    # Local import: `message` imports this module at load time.
    from diagreport.model.message import VFileMessage

    if value is None:
        return None
    if isinstance(value, (NestedMessage, ErrorLike, Primitive, Unknown)):
        return value
    if isinstance(value, VFileMessage):
        return NestedMessage(value)
    if id(value) in _seen:
        logger.debug("Cause chain loops back to %r; stopping", value)
        return None
    seen: frozenset[int] = _seen | {id(value)}

    if isinstance(value, BaseException):
        inner: BaseException | None = value.__cause__
        if inner is None and not value.__suppress_context__:
            inner = value.__context__
        return ErrorLike(
            message=str(value),
            stack=format_exception_stack(value),
            cause=resolve_cause(inner, _seen=seen),
        )
    if isinstance(value, (str, int, float)):
        return Primitive(str(value))

    message: object
    stack: object
    raw_cause: object
    if isinstance(value, Mapping):
        message = value.get("message")
        stack = value.get("stack")
        raw_cause = value.get("cause")
    else:
        message = getattr(value, "message", None)
        stack = getattr(value, "stack", None)
        raw_cause = getattr(value, "cause", None)

    if message is None and not stack:
        logger.trace("Cause %r has neither message nor stack", value)
        return Unknown()

    return ErrorLike(
        message="" if message is None else str(message),
        stack=str(stack) if stack else None,
        cause=resolve_cause(raw_cause, _seen=seen),
    )
