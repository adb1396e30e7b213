# topmark:header:start
#
#   project      : DiagReport
#   file         : console.py
#   file_relpath : src/diagreport/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Where the CLI writes what users read.

`ReportConsole` sends the rendered report to stdout and CLI errors to
stderr; `logging` stays reserved for diagnostics about the run itself.
"""

from __future__ import annotations

import click

from diagreport.cli_shared.console_api import ConsoleLike


class ReportConsole(ConsoleLike):
    """Click-backed console bound to the color decision of one run.

    Args:
        enable_color (bool): Whether ANSI sequences reach the terminal; when
            False, Click strips any that slip through and errors stay plain.
    """

    enable_color: bool

    def __init__(self, *, enable_color: bool) -> None:
        self.enable_color = enable_color

    def report(self, text: str) -> None:
        """Write a rendered report to stdout; an empty report writes nothing."""
        if text:
            click.echo(text, color=self.enable_color)

    def error(self, message: str) -> None:
        """Write ``Error: <message>`` to stderr, bright red when color is on."""
        line: str = f"Error: {message}"
        if self.enable_color:
            line = click.style(line, fg="bright_red")
        click.echo(line, err=True, color=self.enable_color)
