# topmark:header:start
#
#   project      : DiagReport
#   file         : io.py
#   file_relpath : src/diagreport/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input loading for the CLI.

Each input is a JSON document (a path, or ``-`` for STDIN) holding one file
object or a list of file objects:

```json
{
  "path": "a.js",
  "history": ["a.js"],
  "stored": false,
  "value": "var a = 1",
  "messages": [
    {"reason": "Warning!", "fatal": false, "line": 1, "column": 1, "ruleId": "no-var"}
  ]
}
```

Messages locate themselves with either ``line``/``column`` or a
``position`` object (``{"start": {...}, "end": {...}}``). Optional message
keys: ``origin``, ``ruleId``, ``source``, ``note``, ``url``, ``cause``,
``ancestors`` (``{"type", "name", "tagName", "position"}``, root first) and
``stack``.

Shape errors raise `DiagReportUsageError`; unreadable JSON raises
`DiagReportDataError`.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import click

from diagreport.cli.errors import (
    DiagReportDataError,
    DiagReportFileNotFoundError,
    DiagReportIOError,
    DiagReportUsageError,
)
from diagreport.config.logging import get_logger
from diagreport.model.file import VFile
from diagreport.model.message import Ancestor, VFileMessage
from diagreport.model.position import Point, Position

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.position import Place


logger: DiagReportLogger = get_logger(__name__)

STDIN_SENTINEL: str = "-"


def _expect_mapping(value: object, what: str) -> Mapping[str, Any]:
    if not isinstance(value, dict):
        raise DiagReportUsageError(f"Expected {what} to be an object, got {type(value).__name__}")
    return value


def _optional(obj: Mapping[str, Any], key: str, kind: type | tuple[type, ...]) -> Any:
    value: object = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, kind) or (kind is int and isinstance(value, bool)):
        raise DiagReportUsageError(f"Invalid '{key}': {value!r}")
    return value


def parse_point(value: object) -> Point:
    """Parse ``{"line", "column", "offset"}`` into a `Point`."""
    obj = _expect_mapping(value, "a point")
    return Point(
        line=_optional(obj, "line", int),
        column=_optional(obj, "column", int),
        offset=_optional(obj, "offset", int),
    )


def parse_position(value: object) -> Position:
    """Parse ``{"start": point, "end": point}`` into a `Position`.

    A missing end yields an empty end point, which renders as the start only.
    """
    obj = _expect_mapping(value, "a position")
    if "start" not in obj:
        raise DiagReportUsageError("A position requires a 'start' point")
    end: object = obj.get("end")
    return Position(start=parse_point(obj["start"]), end=parse_point(end) if end else Point())


def parse_place(obj: Mapping[str, Any]) -> Place | None:
    """Return the place described by a message or node object, if any."""
    if obj.get("position") is not None:
        return parse_position(obj["position"])
    if obj.get("line") is not None or obj.get("column") is not None:
        return parse_point(obj)
    return None


def parse_ancestor(value: object) -> Ancestor:
    """Parse a syntax-tree node into an `Ancestor`."""
    obj = _expect_mapping(value, "an ancestor")
    node_type: object = obj.get("type")
    if not isinstance(node_type, str):
        raise DiagReportUsageError(f"An ancestor requires a 'type' string, got {node_type!r}")
    position: object = obj.get("position")
    return Ancestor(
        type=node_type,
        name=_optional(obj, "name", str),
        tag_name=_optional(obj, "tagName", str),
        position=parse_position(position) if position else None,
    )


def parse_message(value: object, *, file: str | None = None) -> VFileMessage:
    """Parse a message object into a `VFileMessage`."""
    obj = _expect_mapping(value, "a message")
    reason: object = obj.get("reason")
    if not isinstance(reason, str):
        raise DiagReportUsageError(f"A message requires a 'reason' string, got {reason!r}")
    fatal: object = obj.get("fatal")
    if fatal is not None and not isinstance(fatal, bool):
        raise DiagReportUsageError(f"Invalid 'fatal': {fatal!r}")

    ancestors: object = obj.get("ancestors") or []
    if not isinstance(ancestors, list):
        raise DiagReportUsageError(f"Invalid 'ancestors': {ancestors!r}")

    return VFileMessage(
        reason,
        parse_place(obj),
        _optional(obj, "origin", str),
        fatal=cast("bool | None", fatal),
        rule_id=_optional(obj, "ruleId", str),
        source=_optional(obj, "source", str),
        note=_optional(obj, "note", str),
        url=_optional(obj, "url", str),
        cause=obj.get("cause"),
        ancestors=[parse_ancestor(item) for item in ancestors],
        file=file,
        stack=_optional(obj, "stack", str),
    )


def parse_file(value: object) -> VFile:
    """Parse a file object into a `VFile` carrying its messages."""
    obj = _expect_mapping(value, "a file")
    history: object = obj.get("history") or []
    if not isinstance(history, list) or not all(isinstance(item, str) for item in history):
        raise DiagReportUsageError(f"Invalid 'history': {history!r}")
    messages: object = obj.get("messages") or []
    if not isinstance(messages, list):
        raise DiagReportUsageError(f"Invalid 'messages': {messages!r}")

    file = VFile(
        _optional(obj, "path", str) or None,
        value=_optional(obj, "value", str),
        stored=bool(obj.get("stored", False)),
        history=history,
    )
    file.messages.extend(parse_message(item, file=file.path) for item in messages)
    return file


def parse_document(document: object) -> list[VFile]:
    """Parse a decoded JSON document (one file object or a list of them)."""
    if isinstance(document, list):
        return [parse_file(item) for item in document]
    return [parse_file(document)]


def read_input(source: str) -> str:
    """Return the text of an input path, or of STDIN for ``-``.

    Raises:
        DiagReportFileNotFoundError: If the path does not exist.
        DiagReportIOError: If the input cannot be read.
        DiagReportDataError: If the input is not valid UTF-8.
    """
    if source == STDIN_SENTINEL:
        return click.get_text_stream("stdin").read()

    path = Path(source)
    if not path.exists():
        raise DiagReportFileNotFoundError(f"No such file: {source}")
    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise DiagReportDataError(f"{source}: not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise DiagReportIOError(f"{source}: {exc.strerror or exc}") from exc


def load_files(sources: Iterable[str]) -> list[VFile]:
    """Read, decode and parse every input, preserving input order.

    Blank inputs contribute no files.

    Raises:
        DiagReportDataError: If an input is not valid JSON.
        DiagReportUsageError: If an input does not describe files.
    """
    files: list[VFile] = []
    for source in sources:
        text: str = read_input(source)
        if not text.strip():
            logger.debug("Input %s is empty", source)
            continue
        try:
            document: object = json.loads(text)
        except json.JSONDecodeError as exc:
            raise DiagReportDataError(
                f"{source}: invalid JSON at line {exc.lineno}, column {exc.colno}: {exc.msg}"
            ) from exc
        parsed: list[VFile] = parse_document(document)
        logger.debug("Loaded %d file(s) from %s", len(parsed), source)
        files.extend(parsed)
    return files
