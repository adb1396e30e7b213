# topmark:header:start
#
#   project      : DiagReport
#   file         : options.py
#   file_relpath : src/diagreport/report/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report options (caller intent) and report state (resolved, per call).

`ReportOptions` is what callers pass: every field optional, `color` tri-state.
`ReportState` is what the row builders read: color resolved to a boolean,
`silent` folded into `quiet`, and the one-file flag derived from the call shape.
Both are frozen; nothing mutates them during a call.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields, replace
from typing import TYPE_CHECKING, Any

from diagreport.errors import ReporterUsageError
from diagreport.rendering.colored_enum import make_chalk

if TYPE_CHECKING:
    from collections.abc import Mapping

    from yachalk import ChalkFactory


@dataclass(frozen=True, slots=True)
class ReportOptions:
    """Caller-facing report configuration.

    Attributes:
        color: Emit ANSI styling; `None` infers it from the environment.
        verbose: Show notes, urls, cause chains and ancestor traces.
        quiet: Hide files without surviving messages.
        silent: Like `quiet`, and additionally drop all non-fatal messages.
        default_name: Label for files without a path (``<stdin>`` when unset).
        trace_limit: Maximum number of ancestors shown per trace (unbounded when unset).
        context: Characters of source shown around each message (no excerpts when unset).
    """

    color: bool | None = None
    verbose: bool = False
    quiet: bool = False
    silent: bool = False
    default_name: str | None = None
    trace_limit: int | None = None
    context: int | None = None

    def __post_init__(self) -> None:
        for name in ("trace_limit", "context"):
            value: object = getattr(self, name)
            if value is not None and (
                not isinstance(value, int) or isinstance(value, bool) or value < 0
            ):
                raise ReporterUsageError(
                    f"Option '{name}' must be a non-negative integer, got {value!r}"
                )

    @classmethod
    def field_names(cls) -> frozenset[str]:
        """Return the names of all supported options."""
        return frozenset(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> ReportOptions:
        """Build options from a mapping, rejecting unknown keys.

        Raises:
            ReporterUsageError: If the mapping contains unsupported keys.
        """
        return cls().merged(**mapping)

    def merged(self, **overrides: Any) -> ReportOptions:
        """Return a copy with `overrides` applied.

        Raises:
            ReporterUsageError: If an override names an unsupported option.
        """
        unknown: list[str] = sorted(set(overrides) - self.field_names())
        if unknown:
            raise ReporterUsageError(f"Unknown report option(s): {', '.join(unknown)}")
        return replace(self, **overrides) if overrides else self


@dataclass(frozen=True, slots=True)
class ReportState:
    """Resolved, immutable configuration for one `reporter()` call.

    Attributes:
        color: Whether ANSI styling is emitted.
        verbose: Whether verbose sections are rendered.
        quiet: Whether files without surviving messages are hidden (also set by `silent`).
        silent: Whether non-fatal messages are dropped.
        one_file: Whether a single file (not a collection) was passed.
        default_name: Explicit label for path-less files, if any.
        trace_limit: Maximum ancestors shown per trace.
        context: Excerpt width around message positions.
        chalk: Style factory derived from `color`; renders plain text when color is off.
    """

    color: bool
    verbose: bool = False
    quiet: bool = False
    silent: bool = False
    one_file: bool = False
    default_name: str | None = None
    trace_limit: int | None = None
    context: int | None = None
    chalk: ChalkFactory = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "chalk", make_chalk(self.color))

    @classmethod
    def from_options(cls, options: ReportOptions, *, color: bool, one_file: bool) -> ReportState:
        """Resolve caller options into a report state.

        Args:
            options: Caller options.
            color: The resolved color capability.
            one_file: Whether the caller passed a single file.

        Returns:
            The resolved state.
        """
        return cls(
            color=color,
            verbose=options.verbose,
            quiet=options.quiet or options.silent,
            silent=options.silent,
            one_file=one_file,
            default_name=options.default_name,
            trace_limit=options.trace_limit,
            context=options.context,
        )
