# topmark:header:start
#
#   project      : DiagReport
#   file         : exit_codes.py
#   file_relpath : src/diagreport/cli_shared/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the DiagReport CLI.

DiagReport aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. `FAILURE` is reserved for
reports containing fatal messages, the way linters signal findings.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DiagReport CLI.

    Attributes:
        SUCCESS: The report was printed and contains no fatal messages.
        FAILURE: The report was printed and contains at least one fatal message.
        USAGE_ERROR: Invalid flags, or input documents of the wrong shape.
            Mirrors BSD ``EX_USAGE (64)``.
        DATA_ERROR: An input document is not valid JSON or not valid text.
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: An input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: An input could not be read. Mirrors BSD ``EX_IOERR (74)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
