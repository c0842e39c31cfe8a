"""Semantic locations that resolve to absolute file paths.

A location names a well-known folder (the user's Pictures folder, an
application's data folder, ...) plus an ordered list of subdirectories.
Resolving it only consults the directory lookup; nothing on disk is read or
created.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import (
    DocumentError,
    DocumentsDirNotFound,
    DownloadsDirNotFound,
    PicturesDirNotFound,
    ProjectDirsNotFound,
    ResolutionError,
    UserDirsNotFound,
    VideosDirNotFound,
)
from .paths import DirectoryLookup, ProjectDir, UserDir, join_app_id

__all__ = ["Location", "User", "Project"]

_MISSING_USER_DIR: dict[UserDir, type[ResolutionError]] = {
    UserDir.PICTURES: PicturesDirNotFound,
    UserDir.VIDEOS: VideosDirNotFound,
    UserDir.DOWNLOADS: DownloadsDirNotFound,
    UserDir.DOCUMENTS: DocumentsDirNotFound,
}

_DEFAULT_LOOKUP = DirectoryLookup()


class Location:
    """Base class for every location kind.

    Subclasses provide ``subdirs`` and ``_base_dir``; the rest is shared.
    """

    subdirs: tuple[str, ...] = ()

    def _base_dir(self, lookup: DirectoryLookup) -> Path:
        raise NotImplementedError

    def directory(self, lookup: DirectoryLookup | None = None) -> Path:
        """Return the folder this location points at."""
        path = self._base_dir(lookup or _DEFAULT_LOOKUP)
        for subdir in self.subdirs:
            path = path / subdir
        return path

    def resolve(self, filename: str, lookup: DirectoryLookup | None = None) -> Path:
        """Return the absolute path of ``filename`` inside this location."""
        return self.directory(lookup) / str(filename)

    def path(self, lookup: DirectoryLookup | None = None) -> str:
        try:
            return str(self.directory(lookup))
        except DocumentError:
            return ""

    def name(self, lookup: DirectoryLookup | None = None) -> str:
        try:
            return self.directory(lookup).name
        except DocumentError:
            return ""

    def exists(self, lookup: DirectoryLookup | None = None) -> bool:
        try:
            return self.directory(lookup).exists()
        except DocumentError:
            return False


@dataclass(frozen=True)
class User(Location):
    """One of the current user's well-known folders."""

    kind: UserDir
    subdirs: tuple[str, ...] = ()

    @classmethod
    def pictures(cls, *subdirs: str) -> "User":
        return cls(UserDir.PICTURES, subdirs)

    @classmethod
    def videos(cls, *subdirs: str) -> "User":
        return cls(UserDir.VIDEOS, subdirs)

    @classmethod
    def downloads(cls, *subdirs: str) -> "User":
        return cls(UserDir.DOWNLOADS, subdirs)

    @classmethod
    def documents(cls, *subdirs: str) -> "User":
        return cls(UserDir.DOCUMENTS, subdirs)

    @classmethod
    def home(cls, *subdirs: str) -> "User":
        return cls(UserDir.HOME, subdirs)

    def _base_dir(self, lookup: DirectoryLookup) -> Path:
        user_dirs = lookup.user_dirs()
        if user_dirs is None:
            raise UserDirsNotFound()
        base = user_dirs.dir_for(self.kind)
        if base is None:
            raise _MISSING_USER_DIR.get(self.kind, UserDirsNotFound)()
        return base


@dataclass(frozen=True)
class Project(Location):
    """A per-application folder keyed by a reverse-DNS id.

    ``Project.data().with_id("com", "example", "App")`` is the data folder of
    the application ``com.example.App``.
    """

    kind: ProjectDir
    subdirs: tuple[str, ...] = ()
    qualifier: str = ""
    organization: str = ""
    application: str = ""

    @classmethod
    def config(cls, *subdirs: str) -> "Project":
        return cls(ProjectDir.CONFIG, subdirs)

    @classmethod
    def data(cls, *subdirs: str) -> "Project":
        return cls(ProjectDir.DATA, subdirs)

    @classmethod
    def from_app_id(cls, kind: ProjectDir, app_id: str, *subdirs: str) -> "Project":
        """Build a location from a dotted id such as ``com.example.App``.

        The organization may itself contain dots (``com.github.user.App``).
        """
        parts = app_id.split(".")
        if len(parts) < 3:
            parts = [""] * (3 - len(parts)) + parts
        qualifier, organization, application = parts[0], ".".join(parts[1:-1]), parts[-1]
        return cls(kind, subdirs, qualifier, organization, application)

    def with_id(self, qualifier: str, organization: str, application: str) -> "Project":
        return Project(self.kind, self.subdirs, qualifier, organization, application)

    @property
    def app_id(self) -> str:
        return join_app_id(self.qualifier, self.organization, self.application)

    def _base_dir(self, lookup: DirectoryLookup) -> Path:
        project_dirs = lookup.project_dirs(self.qualifier, self.organization, self.application)
        if project_dirs is None:
            raise ProjectDirsNotFound()
        return project_dirs.dir_for(self.kind)
