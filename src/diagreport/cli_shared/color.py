# topmark:header:start
#
#   project      : DiagReport
#   file         : color.py
#   file_relpath : src/diagreport/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Color capability of a report.

Two callers decide here whether a report carries ANSI styling: `reporter()`
when its `color` option is unset, and the CLI from its ``--color`` and
``--no-color`` flags. Row builders only ever receive the resulting boolean.

Precedence: an explicit ``always``/``never`` wins; then the environment
(``FORCE_COLOR`` other than ``0`` enables, ``NO_COLOR`` disables); then
whether the output stream is a terminal.
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import TYPE_CHECKING

from diagreport.config.logging import get_logger

if TYPE_CHECKING:
    from typing import TextIO

    from diagreport.config.logging import DiagReportLogger


logger: DiagReportLogger = get_logger(__name__)


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"

    @classmethod
    def from_flags(cls, mode: ColorMode | None, *, no_color: bool) -> ColorMode:
        """Fold ``--no-color`` and an omitted ``--color`` into a single mode."""
        if no_color:
            return cls.NEVER
        return mode or cls.AUTO


def env_color_preference() -> bool | None:
    """Return the preference stated by ``FORCE_COLOR`` / ``NO_COLOR``, or None."""
    force_color: str | None = os.getenv("FORCE_COLOR")
    if force_color and force_color != "0":
        return True
    if os.getenv("NO_COLOR") is not None:
        return False
    return None


def is_terminal(stream: TextIO | None = None) -> bool:
    """Return whether `stream` (stdout by default) is an interactive terminal."""
    stream = sys.stdout if stream is None else stream
    try:
        return stream.isatty()
    except (AttributeError, OSError, ValueError):
        return False


def color_enabled(mode: ColorMode = ColorMode.AUTO, *, isatty: bool | None = None) -> bool:
    """Decide whether a report is colorized.

    Args:
        mode: Caller intent; `AUTO` defers to the environment and the terminal.
        isatty: Terminal status of the output; probed on stdout when None.

    Returns:
        True if ANSI styling should be emitted.
    """
    if mode == ColorMode.ALWAYS:
        return True
    if mode == ColorMode.NEVER:
        return False

    preference: bool | None = env_color_preference()
    if preference is not None:
        logger.debug("Color %s by environment", "forced" if preference else "disabled")
        return preference

    if isatty is None:
        isatty = is_terminal()
    logger.trace("Color follows the terminal: isatty=%s", isatty)
    return isatty
