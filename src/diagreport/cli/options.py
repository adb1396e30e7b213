# topmark:header:start
#
#   project      : DiagReport
#   file         : options.py
#   file_relpath : src/diagreport/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Reusable Click options for the DiagReport CLI.

Each decorator adds a coherent group of options so the command stays thin.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ParamSpec, TypeVar

import click

from diagreport.cli_shared.color import ColorMode

if TYPE_CHECKING:
    from collections.abc import Callable

P = ParamSpec("P")
R = TypeVar("R")


def _to_color_mode(
    _ctx: click.Context, _param: click.Parameter, value: str | None
) -> ColorMode | None:
    return ColorMode(value) if value is not None else None


def common_report_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds the report display options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with report options added.

    Behavior:
        ``--verbose`` shows notes, urls, causes and traces; ``--quiet`` hides
        files without messages; ``--silent`` additionally hides non-fatal
        messages. ``--default-name``, ``--trace-limit`` and ``--context`` tune
        the labels, traces and source excerpts.
    """
    f = click.option(
        "-v",
        "--verbose",
        is_flag=True,
        default=False,
        help="Show notes, urls, cause chains and ancestor traces.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        is_flag=True,
        default=False,
        help="Hide files without messages.",
    )(f)
    f = click.option(
        "-s",
        "--silent",
        is_flag=True,
        default=False,
        help="Show only fatal messages (implies --quiet).",
    )(f)
    f = click.option(
        "--default-name",
        "default_name",
        type=str,
        default=None,
        help="Label for files without a path (default: <stdin>).",
    )(f)
    f = click.option(
        "--trace-limit",
        "trace_limit",
        type=click.IntRange(min=0),
        default=None,
        help="Maximum number of ancestors shown per trace in verbose mode.",
    )(f)
    f = click.option(
        "--context",
        "context",
        type=click.IntRange(min=0),
        default=None,
        help="Show N characters of source around each message (needs file values).",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.

    Behavior:
        Adds --color with choices (auto, always, never).
        Adds --no-color flag that disables color output.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=_to_color_mode,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f
