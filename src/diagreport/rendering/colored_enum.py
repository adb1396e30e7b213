# topmark:header:start
#
#   project      : DiagReport
#   file         : colored_enum.py
#   file_relpath : src/diagreport/rendering/colored_enum.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color-aware enum primitives for report rendering.

Key types:
    - `Colorizer`: Protocol describing any callable compatible with
      `yachalk.ChalkBuilder.__call__`.
    - `ColoredStrEnum`: `str, Enum` whose `.value` is the label printed in
      reports and whose `.color` names the chalk style for that label.
    - `make_chalk()`: builds the `ChalkFactory` one report renders with.

Members store the *name* of a style (``"red"``), not a builder: a builder
created at import time freezes whatever color mode yachalk had then. The
style is looked up on the per-report factory when the label is painted.

Example:
    ```python
    class Outcome(ColoredStrEnum):
        CLEAN = ("clean", "green")
        DIRTY = ("dirty", "red")

    Outcome("clean") is Outcome.CLEAN          # True
    Outcome.DIRTY.paint(make_chalk(False))     # 'dirty'
    Outcome.DIRTY.paint(make_chalk(True))      # '\\x1b[31mdirty\\x1b[39m'
    ```
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

from yachalk import ChalkFactory
from yachalk.types import ColorMode as ChalkColorMode


class Colorizer(Protocol):
    """Callable that decorates a string for display (e.g. a `ChalkBuilder`)."""

    def __call__(self, *args: object, sep: str = " ") -> str:
        """Colorize and concatenate the provided arguments.

        Args:
            *args (object): One or more objects to render, typically strings.
            sep (str): Separator between arguments when multiple values are provided.

        Returns:
            str: The decorated output string.
        """
        ...


def make_chalk(enabled: bool) -> ChalkFactory:
    """Return a chalk factory that emits basic ANSI colors only when `enabled`.

    The mode is fixed on the factory, so yachalk's process-wide `chalk`
    (which switches itself off when stdout is not a terminal) has no say.

    Args:
        enabled: Whether styling is emitted at all.

    Returns:
        A `ChalkFactory` in `Basic16` mode when enabled, `AllOff` otherwise.
    """
    return ChalkFactory(ChalkColorMode.Basic16 if enabled else ChalkColorMode.AllOff)


class ColoredStrEnum(str, Enum):
    """Enum whose *value* is a display label and that names a chalk style."""

    _value_: str
    _color: str

    def __new__(cls, text: str, color: str) -> ColoredStrEnum:
        """Construct a colored enum member.

        Args:
            text (str): The label for the enum member (stored in `_value_`).
            color (str): Name of a `ChalkFactory` style, e.g. ``"red"``.

        Returns:
            ColoredStrEnum: The newly constructed enum member.
        """
        obj: ColoredStrEnum = str.__new__(cls, text)
        obj._value_ = text
        obj._color = color
        return obj

    @property
    def value(self) -> str:
        """Return the label of the enum member."""
        return self._value_

    @property
    def color(self) -> str:
        """Return the name of the style associated with this member."""
        return self._color

    def styler(self, chalk: ChalkFactory) -> Colorizer:
        """Return this member's style as built by `chalk`."""
        return getattr(chalk, self._color)

    def paint(self, chalk: ChalkFactory, text: str | None = None) -> str:
        """Render `text` (defaults to the member label) in this member's color.

        Args:
            chalk: Factory carrying the color mode of the current report.
            text: Text to render; the member's own label when None.

        Returns:
            The colorized text; unchanged when `chalk` has colors off.
        """
        return self.styler(chalk)(self._value_ if text is None else text)
