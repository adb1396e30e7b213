# topmark:header:start
#
#   project      : DiagReport
#   file         : messages.py
#   file_relpath : src/diagreport/report/messages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Message row builder.

Turns one `VFileMessage` into a `MessageRow`:

- the primary row is a cell tuple ``("", place, label, reason, rule id, source)``;
  the reason cell holds the whole reason (the stack when the message carries
  one), of which only the first line is styled and aligned;
- the rest of the reason, from its first line break on, is emitted verbatim;
- in verbose mode, note, url, cause chain and ancestor trace sections follow;
- with a `context` width and file contents, a source excerpt precedes the row.

Layout of the verbose sections:

```text
  1:1  error  Cannot process `a.md`  no-missing  lint
Some note text
    [url]: https://example.com/no-missing
    [cause]:
      ValueError: boom
      [cause]:
        KeyError: 'x'
    [trace]:
      at paragraph (1:1-1:8)
      at root (1:1-3:1)
```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from diagreport.config.logging import get_logger
from diagreport.constants import CIRCULAR_CAUSE_MARKER, UNKNOWN_CAUSE_MARKER
from diagreport.model.cause import ErrorLike, NestedMessage, Primitive, Unknown
from diagreport.model.position import Position, display_place, start_of
from diagreport.rendering.inline import style_code_spans
from diagreport.rendering.width import split_first_line, split_lines
from diagreport.report.rows import MessageRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.cause import Cause
    from diagreport.model.message import VFileMessage
    from diagreport.report.options import ReportState
    from diagreport.report.rows import Cells


logger: DiagReportLogger = get_logger(__name__)

SECTION_INDENT: str = "    "
NESTED_INDENT: str = "  "


def message_sort_key(message: VFileMessage) -> tuple[int, int]:
    """Return the ``(line, column)`` sort key; missing values count as 0."""
    start = message.start
    if start is None:
        return (0, 0)
    return (start.line or 0, start.column or 0)


def sort_messages(messages: Iterable[VFileMessage]) -> list[VFileMessage]:
    """Return a new list of `messages` in stable ``(line, column)`` order."""
    return sorted(messages, key=message_sort_key)


def _reason_head(text: str, state: ReportState) -> str:
    return style_code_spans(text, state.chalk.bold) if state.color else text


def build_cells(
    message: VFileMessage,
    head: str,
    state: ReportState,
    *,
    rest: str = "",
) -> Cells:
    """Return the cells of a message's primary row; `rest` trails the reason head unstyled."""
    return (
        "",
        display_place(message.place),
        message.severity.paint(state.chalk),
        _reason_head(head, state) + rest,
        message.rule_id or "",
        message.source or "",
    )


def build_message_row(
    message: VFileMessage,
    state: ReportState,
    *,
    value: str | None = None,
) -> MessageRow:
    """Render one message.

    Args:
        message: The message to render.
        state: The resolved report state.
        value: Contents of the file the message belongs to, for excerpts.

    Returns:
        The primary cells plus any continuation rows.
    """
    head, rest = split_first_line(message.display_reason)
    continuation: list[str] = []
    if state.verbose:
        continuation.extend(
            verbose_lines(
                message,
                state,
                indent=SECTION_INDENT,
                note_indent="",
                seen=frozenset({id(message)}),
            )
        )

    excerpt: str | None = None
    if state.context is not None and value is not None:
        excerpt = source_excerpt(message, value, state.context)

    return MessageRow(
        cells=build_cells(message, head, state, rest=rest),
        continuation=tuple(continuation),
        excerpt=excerpt,
    )


def verbose_lines(
    message: VFileMessage,
    state: ReportState,
    *,
    indent: str,
    note_indent: str,
    seen: frozenset[int],
) -> list[str]:
    """Render the note, url, cause and trace sections of a message."""
    lines: list[str] = []
    if message.note:
        lines.extend(note_indent + line for line in split_lines(message.note))
    if message.url:
        lines.append(f"{indent}[url]: {message.url}")
    if message.cause is not None:
        lines.extend(cause_lines(message.cause, state, indent=indent, seen=seen))
    lines.extend(trace_lines(message, state, indent=indent))
    return lines


def cause_lines(
    cause: Cause,
    state: ReportState,
    *,
    indent: str,
    seen: frozenset[int],
) -> list[str]:
    """Render a ``[cause]:`` section, recursing through nested causes."""
    body: str = indent + NESTED_INDENT
    lines: list[str] = [f"{indent}[cause]:"]

    match cause:
        case NestedMessage(message=nested):
            if id(nested) in seen:
                logger.debug("Cause chain of %r is circular", nested)
                lines.append(body + CIRCULAR_CAUSE_MARKER)
                return lines
            head, *rest = split_lines(nested.display_reason)
            parts = build_cells(nested, head, state)[1:]
            lines.append(body + "  ".join(part for part in parts if part))
            lines.extend(body + line for line in rest)
            lines.extend(
                verbose_lines(
                    nested,
                    state,
                    indent=body,
                    note_indent=body,
                    seen=seen | {id(nested)},
                )
            )
        case ErrorLike(message=text, stack=stack, cause=inner):
            lines.extend(body + line for line in split_lines(stack or text))
            if inner is not None:
                lines.extend(cause_lines(inner, state, indent=body, seen=seen))
        case Primitive(text=text):
            lines.extend(body + line for line in split_lines(text))
        case Unknown():
            lines.append(body + UNKNOWN_CAUSE_MARKER)

    return lines


def trace_lines(message: VFileMessage, state: ReportState, *, indent: str) -> list[str]:
    """Render the ``[trace]:`` section: ancestors nearest-first, up to `trace_limit`."""
    ancestors = list(reversed(message.ancestors))
    if state.trace_limit is not None:
        ancestors = ancestors[: state.trace_limit]
    if not ancestors:
        return []

    lines: list[str] = [f"{indent}[trace]:"]
    for node in ancestors:
        where: str = f" ({display_place(node.position)})" if node.position else ""
        lines.append(f"{indent}{NESTED_INDENT}at {node.label}{where}")
    return lines


def source_excerpt(message: VFileMessage, value: str, context: int) -> str | None:
    """Return a quoted excerpt of the source around the message place.

    Args:
        message: Message whose place selects the excerpt.
        value: File contents.
        context: Characters of surrounding source kept on each side.

    Returns:
        ``"...<excerpt>..."`` (quotes included), or None when the message has no
        usable place.
    """
    start = start_of(message.place)
    if start is None or not start.line or not start.column:
        return None

    lines: list[str] = value.split("\n")
    if start.line > len(lines):
        return None

    end = message.place.end if isinstance(message.place, Position) else start
    end_line: int = end.line or start.line
    end_column: int = end.column or start.column

    line: str = lines[start.line - 1]
    start_index: int = max(start.column - 1 - context, 0)

    excerpt: str
    if start.line < end_line <= len(lines):
        excerpt = line[start_index:] + "..." + lines[end_line - 1][: end_column + context]
    else:
        excerpt = line[start_index : end_column + context]
    return f'"...{excerpt}..."'
