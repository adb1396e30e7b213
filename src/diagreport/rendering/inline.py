# topmark:header:start
#
#   project      : DiagReport
#   file         : inline.py
#   file_relpath : src/diagreport/rendering/inline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Inline code span styling for message reasons.

A code span opens with a run of N backticks and closes at the next run of
exactly N backticks (CommonMark semantics). Unclosed runs are left as-is.
Styling only adds ANSI sequences, so cell widths are unaffected.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from diagreport.rendering.colored_enum import Colorizer

BACKTICK_RUN_RE: Final[re.Pattern[str]] = re.compile(r"`+")


def style_code_spans(text: str, styler: Colorizer) -> str:
    """Apply `styler` to every closed inline code span in `text`.

    Args:
        text: Plain reason text.
        styler: Colorizer applied to each span, delimiters included.

    Returns:
        The text with code spans styled.
    """
    runs: list[re.Match[str]] = list(BACKTICK_RUN_RE.finditer(text))
    parts: list[str] = []
    cursor: int = 0
    index: int = 0

    while index < len(runs):
        opener: re.Match[str] = runs[index]
        size: int = len(opener.group())
        closer_index: int | None = next(
            (j for j in range(index + 1, len(runs)) if len(runs[j].group()) == size),
            None,
        )
        if closer_index is None:
            index += 1
            continue

        closer: re.Match[str] = runs[closer_index]
        parts.append(text[cursor : opener.start()])
        parts.append(styler(text[opener.start() : closer.end()]))
        cursor = closer.end()
        index = closer_index + 1

    parts.append(text[cursor:])
    return "".join(parts)
