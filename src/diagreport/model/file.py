# topmark:header:start
#
#   project      : DiagReport
#   file         : file.py
#   file_relpath : src/diagreport/model/file.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Virtual files: a path history, an optional value, and a list of messages.

The first entry of `history` is the origin path; the last is the current
path. A file is *moved* when it was stored under a path other than its origin.
"""

from __future__ import annotations

import os
import posixpath
from typing import TYPE_CHECKING, Any, NoReturn

from diagreport.config.logging import get_logger
from diagreport.model.message import VFileMessage

if TYPE_CHECKING:
    from collections.abc import Iterable

    from diagreport.config.logging import DiagReportLogger
    from diagreport.model.message import Ancestor
    from diagreport.model.position import Point, Position


logger: DiagReportLogger = get_logger(__name__)


class VFile:
    """A virtual file collecting diagnostic messages.

    Args:
        path: Current path of the file, if any.
        value: File contents, used for source excerpts.
        messages: Initial messages.
        stored: Whether the file was written as part of processing.
        history: Explicit path history; `path` is appended when it differs
            from the last entry.
    """

    def __init__(
        self,
        path: str | os.PathLike[str] | None = None,
        *,
        value: str | None = None,
        messages: Iterable[VFileMessage] = (),
        stored: bool = False,
        history: Iterable[str] = (),
    ) -> None:
        self.history: list[str] = [os.fspath(entry) for entry in history]
        self.messages: list[VFileMessage] = list(messages)
        self.stored: bool = stored
        self.value: str | None = value
        if path is not None:
            self.path = path

    @property
    def path(self) -> str | None:
        """Return the current path."""
        return self.history[-1] if self.history else None

    @path.setter
    def path(self, path: str | os.PathLike[str]) -> None:
        new_path: str = os.fspath(path)
        if not new_path:
            raise ValueError("`path` cannot be empty")
        if new_path != self.path:
            self.history.append(new_path)

    @property
    def origin(self) -> str | None:
        """Return the first recorded path."""
        return self.history[0] if self.history else None

    @property
    def dirname(self) -> str | None:
        """Return the directory part of the current path."""
        return posixpath.dirname(self.path) if self.path else None

    @property
    def basename(self) -> str | None:
        """Return the file name of the current path."""
        return posixpath.basename(self.path) if self.path else None

    @basename.setter
    def basename(self, basename: str) -> None:
        if not basename or "/" in basename:
            raise ValueError(f"`basename` cannot be empty or contain a separator: {basename!r}")
        self.path = posixpath.join(self.dirname or "", basename)

    @property
    def stem(self) -> str | None:
        """Return the file name of the current path without its extension."""
        basename = self.basename
        return posixpath.splitext(basename)[0] if basename else None

    @stem.setter
    def stem(self, stem: str) -> None:
        if not stem or "/" in stem:
            raise ValueError(f"`stem` cannot be empty or contain a separator: {stem!r}")
        if self.path is None:
            raise ValueError("Setting `stem` requires a path")
        extension: str = posixpath.splitext(self.basename or "")[1]
        self.basename = stem + extension

    @property
    def moved(self) -> bool:
        """Return True when the file was stored under a path other than its origin."""
        return self.stored and self.path != self.origin

    def _add(self, message: VFileMessage) -> VFileMessage:
        self.messages.append(message)
        logger.trace("Adding [%s] to %s: %r", message.severity.value, self.path, message.reason)
        return message

    def message(
        self,
        reason: str | BaseException,
        place: Point | Position | Ancestor | None = None,
        origin: str | None = None,
        **kwargs: Any,
    ) -> VFileMessage:
        """Add a warning message to the file and return it."""
        return self._add(
            VFileMessage(reason, place, origin, fatal=False, file=self.path, **kwargs)
        )

    def info(
        self,
        reason: str | BaseException,
        place: Point | Position | Ancestor | None = None,
        origin: str | None = None,
        **kwargs: Any,
    ) -> VFileMessage:
        """Add an informational message to the file and return it."""
        return self._add(
            VFileMessage(reason, place, origin, fatal=None, file=self.path, **kwargs)
        )

    def fail(
        self,
        reason: str | BaseException,
        place: Point | Position | Ancestor | None = None,
        origin: str | None = None,
        **kwargs: Any,
    ) -> NoReturn:
        """Add a fatal message to the file and raise it.

        Raises:
            VFileMessage: Always; the message is recorded on the file first.
        """
        raise self._add(
            VFileMessage(reason, place, origin, fatal=True, file=self.path, **kwargs)
        )

    def __repr__(self) -> str:
        return (
            f"VFile(path={self.path!r}, stored={self.stored!r}, "
            f"messages={len(self.messages)})"
        )
