# topmark:header:start
#
#   project      : DiagReport
#   file         : summary.py
#   file_relpath : src/diagreport/report/summary.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Trailing summary line, e.g. ``5 messages (✖ 2 errors, ⚠ 3 warnings)``."""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagreport.constants import ERROR_GLYPH, WARNING_GLYPH
from diagreport.model.severity import Severity

if TYPE_CHECKING:
    from yachalk import ChalkFactory

    from diagreport.model.statistics import Statistics


def plural(word: str, count: int) -> str:
    """Return `word` with an ``s`` appended unless `count` is 1."""
    return word if count == 1 else f"{word}s"


def build_summary(stats: Statistics, chalk: ChalkFactory) -> str:
    """Render the summary line for the whole report.

    Args:
        stats: Counts over all surviving messages.
        chalk: Style factory; glyphs take the color of their severity.

    Returns:
        The summary, or ``""`` when there are neither errors nor warnings.
    """
    parts: list[str] = []
    if stats.fatal:
        glyph: str = Severity.ERROR.paint(chalk, ERROR_GLYPH)
        parts.append(f"{glyph} {stats.fatal} {plural(Severity.ERROR.value, stats.fatal)}")
    if stats.warn:
        glyph = Severity.WARNING.paint(chalk, WARNING_GLYPH)
        parts.append(f"{glyph} {stats.warn} {plural(Severity.WARNING.value, stats.warn)}")
    if not parts:
        return ""

    line: str = ", ".join(parts)
    if stats.total not in (stats.fatal, stats.warn):
        line = f"{stats.total} messages ({line})"
    return line
