# topmark:header:start
#
#   project      : DiagReport
#   file         : api.py
#   file_relpath : src/diagreport/report/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public reporting entry point.

`reporter()` validates the call shape, resolves options into a `ReportState`
(including the color capability when the caller left it unset), then runs
the pipeline:

    assemble → format_report → serialize

The call is pure with respect to its inputs: files and their message lists
are never modified, and identical inputs give identical output.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from diagreport.cli_shared.color import color_enabled
from diagreport.config.logging import get_logger
from diagreport.constants import USAGE_ERROR_MESSAGE
from diagreport.errors import ReporterUsageError
from diagreport.model.file import VFile
from diagreport.report.assembler import assemble, format_report
from diagreport.report.options import ReportOptions, ReportState
from diagreport.report.serializer import serialize

if TYPE_CHECKING:
    from diagreport.config.logging import DiagReportLogger


logger: DiagReportLogger = get_logger(__name__)


def _is_error_like(value: object) -> bool:
    return isinstance(value, BaseException) or (
        hasattr(value, "name") and hasattr(value, "message")
    )


def coerce_files(files: object) -> tuple[list[VFile], bool]:
    """Normalize the `files` argument.

    Args:
        files: A `VFile` or an iterable of `VFile`.

    Returns:
        ``(files, one_file)`` where `one_file` tells whether a single file was passed.

    Raises:
        ReporterUsageError: If `files` is missing, error-like, or not made of files.
    """
    if files is None or _is_error_like(files):
        raise ReporterUsageError(USAGE_ERROR_MESSAGE)
    if isinstance(files, VFile):
        return [files], True
    if isinstance(files, (str, bytes)) or not isinstance(files, Iterable):
        raise ReporterUsageError(USAGE_ERROR_MESSAGE)

    collected: list[VFile] = list(files)
    if not all(isinstance(file, VFile) for file in collected):
        raise ReporterUsageError(USAGE_ERROR_MESSAGE)
    return collected, False


def coerce_options(
    options: ReportOptions | Mapping[str, Any] | None,
    overrides: Mapping[str, Any],
) -> ReportOptions:
    """Merge an options object or mapping with keyword overrides.

    Raises:
        ReporterUsageError: On unknown option names or an unsupported options type.
    """
    if options is None:
        base = ReportOptions()
    elif isinstance(options, ReportOptions):
        base = options
    elif isinstance(options, Mapping):
        base = ReportOptions.from_mapping(options)
    else:
        raise ReporterUsageError(
            f"Expected ReportOptions or a mapping of options, got {type(options).__name__}"
        )
    return base.merged(**overrides)


def reporter(
    files: VFile | Iterable[VFile] | None,
    options: ReportOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """Report the messages of one or more files.

    Args:
        files: A single file (one-file mode) or an iterable of files.
        options: Report options, as `ReportOptions` or a mapping of the same keys.
        **overrides: Individual options; they take precedence over `options`.

    Returns:
        The report; ``""`` when there are no files.

    Raises:
        ReporterUsageError: If `files` is missing or error-like, or options are invalid.

    Example:
        ```python
        >>> file = VFile("a.js")
        >>> _ = file.message("Warning!", Point(1, 1))
        >>> print(reporter([file, VFile("b.js")], color=False))
        a.js
          1:1  warning  Warning!
        <BLANKLINE>
        b.js: no issues found
        <BLANKLINE>
        ⚠ 1 warning
        ```
    """
    collected, one_file = coerce_files(files)
    resolved: ReportOptions = coerce_options(options, overrides)

    color: bool = resolved.color if resolved.color is not None else color_enabled()
    state: ReportState = ReportState.from_options(resolved, color=color, one_file=one_file)
    logger.trace("Reporting %d file(s) with %r", len(collected), state)

    if not collected:
        return ""
    return serialize(format_report(assemble(collected, state), state))
