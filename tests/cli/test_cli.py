# topmark:header:start
#
#   project      : DiagReport
#   file         : test_cli.py
#   file_relpath : tests/cli/test_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""DiagReport command: output, flags and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from diagreport.cli_shared.exit_codes import ExitCode
from diagreport.constants import DIAGREPORT_VERSION, ERROR_GLYPH, WARNING_GLYPH

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result

pytestmark: pytest.MarkDecorator = pytest.mark.cli

WARNING_DOC: dict[str, Any] = {
    "path": "a.js",
    "messages": [{"reason": "Warning!", "fatal": False, "line": 1, "column": 1}],
}

ERROR_DOC: dict[str, Any] = {
    "path": "b.js",
    "messages": [
        {"reason": "Error!", "fatal": True, "line": 2, "column": 3, "ruleId": "no-x"},
        {"reason": "Warning!", "fatal": False, "line": 1, "column": 1},
    ],
}


def test_reports_single_file(run_cli: Any, write_doc: Any) -> None:
    """A single document prints its report and exits successfully."""
    result: Result = run_cli(["--no-color", write_doc(WARNING_DOC)])

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == f"a.js\n  1:1  warning  Warning!\n\n{WARNING_GLYPH} 1 warning\n"


def test_fatal_messages_exit_with_failure(run_cli: Any, write_doc: Any) -> None:
    """Any fatal message makes the command exit with FAILURE."""
    result: Result = run_cli(["--no-color", write_doc(ERROR_DOC)])

    assert result.exit_code == ExitCode.FAILURE
    assert result.output.splitlines() == [
        "b.js",
        "  1:1  warning  Warning!",
        "  2:3  error    Error!    no-x",
        "",
        f"2 messages ({ERROR_GLYPH} 1 error, {WARNING_GLYPH} 1 warning)",
    ]


def test_reads_stdin_without_inputs(run_cli: Any) -> None:
    """Without inputs the document is read from STDIN."""
    result: Result = run_cli(["--no-color"], input_text=json.dumps(WARNING_DOC))

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.startswith("a.js\n  1:1  warning  Warning!")


def test_dash_reads_stdin(run_cli: Any, write_doc: Any) -> None:
    """``-`` mixes STDIN with path inputs."""
    result: Result = run_cli(
        ["--no-color", write_doc({"path": "z.js"}), "-"],
        input_text=json.dumps(WARNING_DOC),
    )

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output.splitlines()[:2] == ["a.js", "  1:1  warning  Warning!"]
    assert "z.js: no issues found" in result.output


def test_empty_stdin_prints_nothing(run_cli: Any) -> None:
    """Blank input yields no files and no output."""
    result: Result = run_cli(["--no-color"], input_text="  \n")

    assert result.exit_code == ExitCode.SUCCESS
    assert result.output == ""


def test_multiple_inputs_are_reported_together(run_cli: Any, write_doc: Any) -> None:
    """Files from all inputs share one report and one summary."""
    result: Result = run_cli(
        [
            "--no-color",
            write_doc(ERROR_DOC, "one.json"),
            write_doc([WARNING_DOC, {"path": "c.js"}], "two.json"),
        ]
    )

    assert result.exit_code == ExitCode.FAILURE
    lines: list[str] = result.output.splitlines()
    assert [line for line in lines if line and not line.startswith(" ")] == [
        "a.js",
        "b.js",
        "c.js: no issues found",
        f"3 messages ({ERROR_GLYPH} 1 error, {WARNING_GLYPH} 2 warnings)",
    ]


def test_single_anonymous_file_has_no_label(run_cli: Any, write_doc: Any) -> None:
    """One loaded file is reported in one-file mode."""
    result: Result = run_cli(["--no-color", write_doc({"messages": []})])

    assert result.output == "no issues found\n"


def test_default_name(run_cli: Any, write_doc: Any) -> None:
    """``--default-name`` labels files without a path."""
    result: Result = run_cli(["--no-color", "--default-name", "README.md", write_doc({})])

    assert result.output == "README.md: no issues found\n"


def test_quiet_and_silent(run_cli: Any, write_doc: Any) -> None:
    """``--quiet`` hides clean files; ``--silent`` also hides warnings."""
    path: str = write_doc([WARNING_DOC, ERROR_DOC, {"path": "c.js"}])

    quiet: Result = run_cli(["--no-color", "--quiet", path])
    silent: Result = run_cli(["--no-color", "--silent", path])

    assert "c.js" not in quiet.output
    assert "a.js" in quiet.output
    assert "a.js" not in silent.output
    assert "Warning!" not in silent.output
    assert silent.output.splitlines()[-1] == f"{ERROR_GLYPH} 1 error"
    assert silent.exit_code == ExitCode.FAILURE


def test_verbose_shows_notes_and_traces(run_cli: Any, write_doc: Any) -> None:
    """``--verbose`` adds notes and traces; ``--trace-limit`` caps traces."""
    document: dict[str, Any] = {
        "path": "a.md",
        "messages": [
            {
                "reason": "Whoops",
                "fatal": False,
                "position": {"start": {"line": 1, "column": 1}, "end": {"line": 1, "column": 6}},
                "note": "Some note",
                "url": "https://example.com/whoops",
                "ancestors": [
                    {"type": "root"},
                    {"type": "element", "tagName": "em"},
                ],
            }
        ],
    }
    path: str = write_doc(document)

    plain: Result = run_cli(["--no-color", path])
    verbose: Result = run_cli(["--no-color", "--verbose", path])
    limited: Result = run_cli(["--no-color", "--verbose", "--trace-limit", "1", path])

    assert "Some note" not in plain.output
    assert verbose.output.splitlines()[1:7] == [
        "  1:1-1:6  warning  Whoops",
        "Some note",
        "    [url]: https://example.com/whoops",
        "    [trace]:",
        "      at <em>",
        "      at root",
    ]
    assert "      at root" not in limited.output
    assert "      at <em>" in limited.output


def test_context_excerpt(run_cli: Any, write_doc: Any) -> None:
    """``--context`` shows source around messages of files with a value."""
    document: dict[str, Any] = {
        "path": "a.js",
        "value": "var a = 1\nvar b = 2\n",
        "messages": [{"reason": "W", "fatal": False, "line": 2, "column": 5}],
    }
    result: Result = run_cli(["--no-color", "--context", "2", write_doc(document)])

    assert result.output.splitlines()[1:3] == ['"...r b =..."', "  2:5  warning  W"]


def test_color_always(run_cli: Any, write_doc: Any) -> None:
    """``--color always`` emits ANSI sequences even when not on a terminal."""
    result: Result = run_cli(["--color", "always", write_doc(WARNING_DOC)])

    assert result.exit_code == ExitCode.SUCCESS
    assert "\x1b[33mwarning\x1b[39m" in result.output
    assert "\x1b[4m\x1b[33ma.js\x1b[24m\x1b[39m" in result.output


def test_no_color_wins(run_cli: Any, write_doc: Any) -> None:
    """``--no-color`` overrides ``--color always``."""
    result: Result = run_cli(["--color", "always", "--no-color", write_doc(WARNING_DOC)])

    assert "\x1b[" not in result.output


def test_missing_file(run_cli: Any, tmp_path: Path) -> None:
    """A missing input exits with FILE_NOT_FOUND."""
    result: Result = run_cli([str(tmp_path / "missing.json")])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND
    assert "No such file" in result.output
    assert "Error: " in result.output


def test_invalid_json(run_cli: Any, tmp_path: Path) -> None:
    """Malformed JSON exits with DATA_ERROR and points at the problem."""
    path: Path = tmp_path / "bad.json"
    path.write_text('{"path": ', encoding="utf-8")

    result: Result = run_cli([str(path)])

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "invalid JSON at line 1" in result.output


def test_invalid_utf8(run_cli: Any, tmp_path: Path) -> None:
    """Undecodable input exits with DATA_ERROR."""
    path: Path = tmp_path / "bad.json"
    path.write_bytes(b'{"path": "\xff"}')

    result: Result = run_cli([str(path)])

    assert result.exit_code == ExitCode.DATA_ERROR
    assert "not valid UTF-8" in result.output


def test_unreadable_input(run_cli: Any, tmp_path: Path) -> None:
    """A directory given as input exits with IO_ERROR."""
    result: Result = run_cli([str(tmp_path)])

    assert result.exit_code == ExitCode.IO_ERROR


@pytest.mark.parametrize(
    ("document", "fragment"),
    [
        ({"messages": [{"fatal": True}]}, "reason"),
        ({"messages": [{"reason": "x", "fatal": "yes"}]}, "fatal"),
        ({"messages": [{"reason": "x", "line": "1"}]}, "line"),
        ("a.js", "object"),
    ],
)
def test_malformed_documents(
    run_cli: Any, write_doc: Any, document: object, fragment: str
) -> None:
    """Documents of the wrong shape exit with USAGE_ERROR."""
    result: Result = run_cli([write_doc(document)])

    assert result.exit_code == ExitCode.USAGE_ERROR
    assert fragment in result.output


def test_invalid_flags(run_cli: Any) -> None:
    """Click rejects unknown flags and out-of-range values."""
    assert run_cli(["--colour"]).exit_code == 2
    assert run_cli(["--trace-limit", "-1"]).exit_code == 2
    assert run_cli(["--color", "sometimes"]).exit_code == 2


def test_version(run_cli: Any) -> None:
    """``--version`` prints the installed version."""
    result: Result = run_cli(["--version"])

    assert result.exit_code == ExitCode.SUCCESS
    assert DIAGREPORT_VERSION in result.output


def test_help(run_cli: Any) -> None:
    """``-h`` lists the report options."""
    result: Result = run_cli(["-h"])

    assert result.exit_code == ExitCode.SUCCESS
    for flag in ("--verbose", "--quiet", "--silent", "--trace-limit", "--context", "--color"):
        assert flag in result.output
