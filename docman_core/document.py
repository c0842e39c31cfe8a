"""Document handles: a resolved path plus the policy it was created under."""

from __future__ import annotations

import io
import logging
import os
import subprocess
import sys
from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import IO, BinaryIO, Iterator

from .errors import (
    CouldNotLaunchFile,
    CouldNotOpenFile,
    DocumentError,
    FileNotFound,
    FileNotOpen,
    FileNotWritable,
)
from .launcher import Launcher, launch_detached
from .locations import Location
from .outcome import Outcome
from .paths import DirectoryLookup
from .policy import Create, apply_policy

__all__ = ["Mode", "Document", "suggest_rename"]

logger = logging.getLogger(__name__)

_FILE_MODES = {
    "READ": "rb",
    "REPLACE": "wb",
    "APPEND": "ab",
    "READ_REPLACE": "r+b",
    "READ_APPEND": "a+b",
}


class Mode(Enum):
    READ = "read"
    REPLACE = "replace"
    APPEND = "append"
    READ_REPLACE = "read_replace"
    READ_APPEND = "read_append"

    def readable(self) -> bool:
        return self in (Mode.READ, Mode.READ_REPLACE, Mode.READ_APPEND)

    def writable(self) -> bool:
        return self is not Mode.READ

    def appendable(self) -> bool:
        return self in (Mode.APPEND, Mode.READ_APPEND)

    def os_flags(self) -> int:
        """Flags for ``os.open``; never includes ``O_CREAT``."""
        if self.readable() and self.writable():
            flags = os.O_RDWR
        elif self.writable():
            flags = os.O_WRONLY
        else:
            flags = os.O_RDONLY
        if self.appendable():
            flags |= os.O_APPEND
        elif self.writable():
            flags |= os.O_TRUNC
        return flags | getattr(os, "O_BINARY", 0)

    def file_mode(self) -> str:
        return _FILE_MODES[self.name]


@dataclass(frozen=True)
class Document:
    """A file identified by an alias.

    Documents hold no open handle: every read or write opens the file and
    closes it before returning.
    """

    alias: str
    path: Path
    create_policy: Create = Create.NO

    @classmethod
    def at(
        cls,
        location: Location,
        filename: str,
        create: Create = Create.NO,
        *,
        alias: str | None = None,
        lookup: DirectoryLookup | None = None,
    ) -> "Document":
        """Resolve ``filename`` inside ``location`` and apply ``create``.

        The alias defaults to ``filename`` even when the file was renamed to
        avoid a collision.
        """
        path = location.resolve(filename, lookup)
        requested_name = path.name
        path = apply_policy(path, create)
        return cls(
            alias=requested_name if alias is None else alias,
            path=path,
            create_policy=create,
        )

    @classmethod
    def from_path(
        cls,
        path: str | os.PathLike[str],
        alias: str,
        create: Create = Create.NO,
    ) -> "Document":
        resolved = apply_policy(Path(path), create)
        return cls(alias=alias, path=resolved, create_policy=create)

    def with_alias(self, alias: str) -> "Document":
        return replace(self, alias=alias)

    # ---------- Introspection ----------

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        """Extension without the leading dot, empty when there is none."""
        return self.path.suffix[1:]

    def exists(self) -> bool:
        return self.path.exists()

    def __str__(self) -> str:
        return str(self.path)

    def __fspath__(self) -> str:
        return str(self.path)

    # ---------- File access ----------

    def file(self, mode: Mode) -> BinaryIO:
        """Open the existing file with permissions derived from ``mode``."""
        try:
            fd = os.open(self.path, mode.os_flags())
        except OSError as exc:
            raise CouldNotOpenFile(str(self.path)) from exc
        return os.fdopen(fd, mode.file_mode())

    def write(self, content: bytes, mode: Mode) -> "Document":
        if not mode.writable():
            raise FileNotWritable(str(self.path))
        handle = self.file(mode)
        try:
            with handle:
                handle.write(content)
        except OSError as exc:
            raise FileNotWritable(str(self.path)) from exc
        return self

    def append(self, content: bytes) -> "Document":
        return self.write(content, Mode.APPEND)

    def replace_with(self, content: bytes) -> "Document":
        return self.write(content, Mode.REPLACE)

    def read_bytes(self) -> bytes:
        handle = self.file(Mode.READ)
        try:
            with handle:
                return handle.read()
        except OSError as exc:
            raise FileNotOpen(str(self.path)) from exc

    def read_text(self, encoding: str = "utf-8") -> str:
        try:
            return self.read_bytes().decode(encoding)
        except UnicodeDecodeError as exc:
            raise FileNotOpen(str(self.path)) from exc

    def lines(self, encoding: str = "utf-8") -> Iterator[str]:
        """Return a lazy iterator over the lines of the file.

        The file is opened right away, so open failures surface here rather
        than on first iteration. Each call opens a fresh handle.
        """
        handle = self.file(Mode.READ)
        return self._iter_lines(io.TextIOWrapper(handle, encoding=encoding))

    def _iter_lines(self, handle: IO[str]) -> Iterator[str]:
        with handle:
            try:
                for line in handle:
                    yield line.rstrip("\r\n")
            except (OSError, UnicodeDecodeError) as exc:
                raise FileNotOpen(str(self.path)) from exc

    def print_lines(self, stream: IO[str] | None = None) -> "Document":
        out = stream or sys.stdout
        for line in self.lines():
            print(line, file=out)
        return self

    def launch_with_default_app(self, launcher: Launcher | None = None) -> "Document":
        """Open the file in the desktop's default application, detached."""
        launch = launcher or launch_detached
        try:
            launch(self.path)
        except (OSError, subprocess.SubprocessError) as exc:
            raise CouldNotLaunchFile(str(self.path)) from exc
        return self


def suggest_rename(outcome: Outcome[Document]) -> str:
    """Suggest where a new copy of a document could be written.

    For a constructed document this is the next free ``name(n).ext`` path.
    For a ``FileNotFound`` failure it is the missing path itself. Anything
    else yields an empty string.
    """
    if outcome.ok and outcome.value is not None:
        try:
            candidate = apply_policy(outcome.value.path, Create.AUTO_RENAME_IF_EXISTS, dry_run=True)
        except DocumentError as exc:
            logger.error("%s", exc)
            return ""
        return str(candidate)
    if isinstance(outcome.error, FileNotFound):
        return outcome.error.path or ""
    return ""
