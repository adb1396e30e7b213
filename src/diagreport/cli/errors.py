# topmark:header:start
#
#   project      : DiagReport
#   file         : errors.py
#   file_relpath : src/diagreport/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the DiagReport CLI.

Usage:
    Raise these exceptions while loading inputs or building the report to
    signal errors with standardized messages and exit codes.

Display:
    The command catches these and writes them through its `ReportConsole`;
    one escaping elsewhere is shown by Click as ``Error: <message>``.
"""

from __future__ import annotations

import click

from diagreport.cli_shared.exit_codes import ExitCode


class DiagReportCliError(click.ClickException):
    """Base class for all DiagReport CLI errors."""

    exit_code = ExitCode.FAILURE


class DiagReportUsageError(DiagReportCliError):
    """Error for invocation errors (invalid flags, malformed input documents)."""

    exit_code = ExitCode.USAGE_ERROR


class DiagReportDataError(DiagReportCliError):
    """Error for inputs that are not valid JSON or not valid UTF-8."""

    exit_code = ExitCode.DATA_ERROR


class DiagReportFileNotFoundError(DiagReportCliError):
    """Error when an input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class DiagReportIOError(DiagReportCliError):
    """Error for I/O errors reading an input."""

    exit_code = ExitCode.IO_ERROR
