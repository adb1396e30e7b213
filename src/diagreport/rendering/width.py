# topmark:header:start
#
#   project      : DiagReport
#   file         : width.py
#   file_relpath : src/diagreport/rendering/width.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Display-width measurement for report cells.

Cells are measured the way a monospace terminal shows them:

- ANSI escape sequences (SGR colors, OSC hyperlinks, ...) occupy no columns;
- only the text before the first line break counts;
- East-Asian wide characters occupy two columns, combining or zero-width
  characters none, and emoji joined by zero-width joiners count as one glyph
  (via `wcwidth.wcswidth`);
- control characters occupy no columns.
"""

from __future__ import annotations

import re
from typing import Final

from wcwidth import wcswidth

# CSI / OSC sequences, equivalent to the widely used `ansi-regex` pattern.
ANSI_RE: Final[re.Pattern[str]] = re.compile(
    "[\u001b\u009b][\\[\\]()#;?]*"
    "(?:(?:(?:(?:;[-a-zA-Z\\d/#&.:=?%@~_]+)*"
    "|[a-zA-Z\\d]+(?:;[-a-zA-Z\\d/#&.:=?%@~_]*)*)?\u0007)"
    "|(?:(?:\\d{1,4}(?:;\\d{0,4})*)?[\\dA-PR-TZcf-nq-uy=><~]))"
)

EOL_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n|\r")

# C0 and C1 controls (DEL included), which wcswidth() refuses to measure.
CONTROL_RE: Final[re.Pattern[str]] = re.compile("[\x00-\x1f\x7f-\x9f]")


def strip_ansi(text: str) -> str:
    """Return `text` without ANSI escape sequences."""
    return ANSI_RE.sub("", text)


def split_first_line(text: str) -> tuple[str, str]:
    r"""Split `text` at its first line break.

    Returns:
        ``(head, rest)`` where `rest` starts with the break itself (``\r\n``,
        ``\n`` or ``\r``) and is empty when `text` is a single line.
    """
    match = EOL_RE.search(text)
    if match is None:
        return text, ""
    return text[: match.start()], text[match.start() :]


def first_line(text: str) -> str:
    """Return the part of `text` before the first line break."""
    return split_first_line(text)[0]


def split_lines(text: str) -> list[str]:
    r"""Split `text` on ``\r\n``, ``\n`` or ``\r`` (an empty string gives ``[""]``)."""
    return EOL_RE.split(text)


def string_width(text: str) -> int:
    """Return the number of terminal columns `text` occupies on its first line.

    Args:
        text: Text to measure; may contain ANSI styling and line breaks.

    Returns:
        The display width; control characters count as zero.
    """
    visible: str = CONTROL_RE.sub("", first_line(strip_ansi(text)))
    return max(wcswidth(visible), 0)
