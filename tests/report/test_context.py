# topmark:header:start
#
#   project      : DiagReport
#   file         : test_context.py
#   file_relpath : tests/report/test_context.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Source excerpts shown before message rows when `context` is set."""

from __future__ import annotations

from diagreport import Point, Position, VFile, VFileMessage, reporter
from diagreport.constants import WARNING_GLYPH
from diagreport.report.messages import source_excerpt

VALUE: str = "var a = 1\nvar b = 2\n"


def test_excerpt_precedes_row() -> None:
    """The excerpt is an unaligned line right above its message."""
    file = VFile("a.js", value=VALUE)
    file.message("W", Point(2, 5))
    assert reporter(file, color=False, context=2) == "\n".join(
        ["a.js", '"...r b =..."', "  2:5  warning  W", "", f"{WARNING_GLYPH} 1 warning"]
    )


def test_excerpt_across_lines() -> None:
    """A multi-line range joins the start and end lines."""
    message = VFileMessage("W", Position(Point(1, 5), Point(2, 3)))
    assert source_excerpt(message, VALUE, 1) == '"... a = 1...var ..."'


def test_excerpt_clamps_at_line_start() -> None:
    """Context never reaches before the first character."""
    message = VFileMessage("W", Point(1, 2))
    assert source_excerpt(message, VALUE, 5) == '"...var a =..."'


def test_no_excerpt_without_usable_place() -> None:
    """Messages without a place, or past the end of the text, get none."""
    assert source_excerpt(VFileMessage("W"), VALUE, 2) is None
    assert source_excerpt(VFileMessage("W", Point(9, 1)), VALUE, 2) is None
    assert source_excerpt(VFileMessage("W", Point(line=1)), VALUE, 2) is None


def test_no_excerpt_without_value_or_context() -> None:
    """Excerpts need both file contents and a context width."""
    with_value = VFile("a.js", value=VALUE)
    with_value.message("W", Point(1, 1))
    without_value = VFile("b.js")
    without_value.message("W", Point(1, 1))

    assert '"...' not in reporter(with_value, color=False)
    assert '"...' not in reporter(without_value, color=False, context=3)
