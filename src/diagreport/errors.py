# topmark:header:start
#
#   project      : DiagReport
#   file         : errors.py
#   file_relpath : src/diagreport/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions raised by the DiagReport library.

Only invalid call shapes are errors. A file carrying fatal diagnostics is
*reported*, never raised: rendering failure information is the purpose of the
library.

CLI-specific exceptions (with exit codes) live in
[`diagreport.cli.errors`][diagreport.cli.errors].
"""

from __future__ import annotations


class DiagReportError(Exception):
    """Base class for all DiagReport library errors."""


class ReporterUsageError(DiagReportError, TypeError):
    """Raised when `reporter()` is called with an invalid argument shape.

    This signals a programming mistake on the caller side (no files, an
    exception object instead of files, unknown options) and is raised before
    any output is produced.
    """
