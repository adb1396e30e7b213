# topmark:header:start
#
#   project      : DiagReport
#   file         : __main__.py
#   file_relpath : src/diagreport/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running DiagReport via ``python -m diagreport``.

It delegates directly to :func:`diagreport.cli.main.cli`, the same command
installed as the ``diagreport`` console script.

Examples:
    Report a JSON document::

        python -m diagreport --verbose report.json
"""

from __future__ import annotations

from diagreport.cli.main import cli

if __name__ == "__main__":
    cli()
