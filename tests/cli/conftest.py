# topmark:header:start
#
#   project      : DiagReport
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test fixtures for running DiagReport through Click's test runner.

`run_cli` invokes the command in-process and returns the
`click.testing.Result`; `write_doc` serializes a JSON file document into the
test's temporary directory and returns its path as a string argument.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Sequence
from typing import IO, TYPE_CHECKING, Any

import pytest
from click.testing import CliRunner, Result

from diagreport.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

RunCli = Callable[..., Result]
WriteDoc = Callable[..., str]


@pytest.fixture
def run_cli() -> RunCli:
    """Return a helper invoking the CLI with optional standard input.

    Example:
        ```python
        result = run_cli(["--no-color", path])
        assert result.exit_code == ExitCode.SUCCESS
        ```
    """

    def _run(
        argv: Sequence[str] | None = None,
        *,
        input_text: str | bytes | IO[Any] | None = None,
    ) -> Result:
        runner = CliRunner()
        return runner.invoke(cli, list(argv or []), input=input_text)

    return _run


@pytest.fixture
def write_doc(tmp_path: Path) -> WriteDoc:
    """Return a helper writing a JSON document under `tmp_path`."""

    def _write(document: object, name: str = "report.json") -> str:
        path: Path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return str(path)

    return _write
