# topmark:header:start
#
#   project      : DiagReport
#   file         : __init__.py
#   file_relpath : src/diagreport/rendering/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Presentation primitives: colorizers, inline styling and display-width measurement.

These helpers are Click-free and report-agnostic; they operate on plain strings.
"""

from __future__ import annotations

from diagreport.rendering.colored_enum import Colorizer, ColoredStrEnum, make_chalk
from diagreport.rendering.inline import style_code_spans
from diagreport.rendering.width import (
    first_line,
    split_first_line,
    split_lines,
    string_width,
    strip_ansi,
)

__all__ = [
    "ColoredStrEnum",
    "Colorizer",
    "first_line",
    "make_chalk",
    "split_first_line",
    "split_lines",
    "string_width",
    "strip_ansi",
    "style_code_spans",
]
