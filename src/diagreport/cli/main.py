# topmark:header:start
#
#   project      : DiagReport
#   file         : main.py
#   file_relpath : src/diagreport/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagReport command-line entry point.

Reads JSON file documents (paths, or STDIN when none are given), renders a
report with [`reporter`][diagreport.report.api.reporter] and exits non-zero
when any fatal message was reported.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from diagreport.cli.console import ReportConsole
from diagreport.cli.errors import DiagReportCliError, DiagReportUsageError
from diagreport.cli.io import STDIN_SENTINEL, load_files
from diagreport.cli.options import common_color_options, common_report_options
from diagreport.cli_shared.color import ColorMode, color_enabled
from diagreport.cli_shared.exit_codes import ExitCode
from diagreport.config.logging import get_logger, resolve_env_log_level, setup_logging
from diagreport.constants import DIAGREPORT_VERSION
from diagreport.errors import ReporterUsageError
from diagreport.model.statistics import compute_statistics
from diagreport.report.api import reporter
from diagreport.report.options import ReportOptions

if TYPE_CHECKING:
    from diagreport.cli_shared.console_api import ConsoleLike
    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.file import VFile

logger: DiagReportLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    color_mode: ColorMode | None,
    no_color: bool,
) -> bool:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        bool: Whether ANSI color is enabled for this run.
    """
    ctx.obj = ctx.obj or {}

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = color_enabled(ColorMode.from_flags(color_mode, no_color=no_color))
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ReportConsole(enable_color=enable_color)
    return enable_color


def render(files: list[VFile], options: ReportOptions) -> str:
    """Render `files`; a single file is reported in one-file mode, like the library call.

    Raises:
        DiagReportUsageError: If `reporter()` rejects the options.
    """
    try:
        return reporter(files[0] if len(files) == 1 else files, options)
    except ReporterUsageError as exc:
        raise DiagReportUsageError(str(exc)) from exc


@click.command(
    name="diagreport",
    context_settings={"help_option_names": ["-h", "--help"]},
    help="Report diagnostic messages of JSON file documents (STDIN when no INPUTS).",
)
@click.argument("inputs", nargs=-1, type=str, metavar="[INPUTS]...")
@common_report_options
@common_color_options
@click.version_option(DIAGREPORT_VERSION, "-V", "--version", prog_name="diagreport")
@click.pass_context
def cli(
    ctx: click.Context,
    inputs: tuple[str, ...],
    verbose: bool,
    quiet: bool,
    silent: bool,
    default_name: str | None,
    trace_limit: int | None,
    context: int | None,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the DiagReport CLI."""
    enable_color = init_common_state(ctx, color_mode=color_mode, no_color=no_color)
    console: ConsoleLike = ctx.obj["console"]

    options = ReportOptions(
        color=enable_color,
        verbose=verbose,
        quiet=quiet,
        silent=silent,
        default_name=default_name,
        trace_limit=trace_limit,
        context=context,
    )
    try:
        files: list[VFile] = load_files(inputs or (STDIN_SENTINEL,))
        text: str = render(files, options)
    except DiagReportCliError as exc:
        logger.debug("Aborting with exit code %d: %s", exc.exit_code, exc.format_message())
        console.error(exc.format_message())
        ctx.exit(exc.exit_code)

    console.report(text)

    fatal: int = compute_statistics(files).fatal
    logger.debug("Reported %d file(s), %d fatal message(s)", len(files), fatal)
    ctx.exit(ExitCode.FAILURE if fatal else ExitCode.SUCCESS)


if __name__ == "__main__":
    cli()
