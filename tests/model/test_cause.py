# topmark:header:start
#
#   project      : DiagReport
#   file         : test_cause.py
#   file_relpath : tests/model/test_cause.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification of raw causes into `Cause` variants."""

from __future__ import annotations

from types import SimpleNamespace

from diagreport.model.cause import (
    ErrorLike,
    NestedMessage,
    Primitive,
    Unknown,
    format_exception_stack,
    resolve_cause,
)
from diagreport.model.message import VFileMessage


def test_none_has_no_cause() -> None:
    """`None` resolves to no cause at all."""
    assert resolve_cause(None) is None


def test_primitives() -> None:
    """Strings and numbers are shown through `str()`."""
    assert resolve_cause("boom") == Primitive("boom")
    assert resolve_cause(42) == Primitive("42")
    assert resolve_cause(1.5) == Primitive("1.5")


def test_nested_message() -> None:
    """A message cause is kept as a nested message."""
    inner = VFileMessage("inner")
    assert resolve_cause(inner) == NestedMessage(inner)


def test_exception_chain() -> None:
    """Exceptions follow `__cause__` into nested error-likes."""
    try:
        try:
            raise KeyError("x")
        except KeyError as inner:
            raise ValueError("outer") from inner
    except ValueError as exc:
        cause = resolve_cause(exc)

    assert isinstance(cause, ErrorLike)
    assert cause.message == "outer"
    assert cause.stack is not None
    assert cause.stack.startswith("ValueError: outer")
    assert isinstance(cause.cause, ErrorLike)
    assert cause.cause.stack is not None
    assert cause.cause.stack.startswith("KeyError: 'x'")
    assert cause.cause.cause is None


def test_implicit_context_is_followed() -> None:
    """An exception raised while handling another one chains to it."""
    try:
        try:
            raise KeyError("x")
        except KeyError:
            raise ValueError("outer")  # noqa: B904
    except ValueError as exc:
        cause = resolve_cause(exc)

    assert isinstance(cause, ErrorLike)
    assert isinstance(cause.cause, ErrorLike)


def test_suppressed_context_is_ignored() -> None:
    """``raise ... from None`` hides the implicit context."""
    try:
        try:
            raise KeyError("x")
        except KeyError:
            raise ValueError("outer") from None
    except ValueError as exc:
        cause = resolve_cause(exc)

    assert isinstance(cause, ErrorLike)
    assert cause.cause is None


def test_mapping_and_object_error_likes() -> None:
    """Mappings and objects with `message` or `stack` are error-like."""
    assert resolve_cause({"message": "boom"}) == ErrorLike(message="boom")
    assert resolve_cause({"stack": "Error: boom\n  at x"}) == ErrorLike(
        message="", stack="Error: boom\n  at x"
    )
    assert resolve_cause(SimpleNamespace(message="boom", cause="why")) == ErrorLike(
        message="boom", cause=Primitive("why")
    )


def test_shapeless_values_are_unknown() -> None:
    """Values without message or stack are unknown."""
    assert resolve_cause({"code": 1}) == Unknown()
    assert resolve_cause(object()) == Unknown()


def test_cyclic_mapping_stops() -> None:
    """A cause chain that loops back to itself ends instead of recursing forever."""
    looped: dict[str, object] = {"message": "loop"}
    looped["cause"] = looped
    assert resolve_cause(looped) == ErrorLike(message="loop", cause=None)


def test_format_unraised_exception() -> None:
    """An exception that was never raised renders as its type and text only."""
    assert format_exception_stack(ValueError("boom")) == "ValueError: boom"
