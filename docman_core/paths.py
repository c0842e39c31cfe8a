"""Platform-independent lookup of user and per-application directories."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Callable, Mapping

from platformdirs import (
    user_config_dir,
    user_data_dir,
    user_documents_dir,
    user_downloads_dir,
    user_pictures_dir,
    user_videos_dir,
)


class UserDir(Enum):
    PICTURES = "pictures"
    VIDEOS = "videos"
    DOWNLOADS = "downloads"
    DOCUMENTS = "documents"
    HOME = "home"


class ProjectDir(Enum):
    CONFIG = "config"
    DATA = "data"


_PLATFORM_USER_DIRS: dict[UserDir, Callable[[], str]] = {
    UserDir.PICTURES: user_pictures_dir,
    UserDir.VIDEOS: user_videos_dir,
    UserDir.DOWNLOADS: user_downloads_dir,
    UserDir.DOCUMENTS: user_documents_dir,
}

# Folder names used below a relocated home directory.
_HOME_RELATIVE_DIRS: dict[UserDir, str] = {
    UserDir.PICTURES: "Pictures",
    UserDir.VIDEOS: "Videos",
    UserDir.DOWNLOADS: "Downloads",
    UserDir.DOCUMENTS: "Documents",
}


def join_app_id(qualifier: str, organization: str, application: str) -> str:
    """Return the dotted reverse-DNS id, skipping empty parts."""
    return ".".join(part for part in (qualifier, organization, application) if part)


def _home_dir() -> Path | None:
    try:
        return Path.home()
    except (RuntimeError, KeyError):
        return None


@dataclass(frozen=True)
class UserDirs:
    """The current user's well-known folders.

    ``overrides`` replaces individual folders; mapping a kind to ``None``
    marks that folder as unavailable.
    """

    home_dir: Path
    overrides: Mapping[UserDir, Path | None] = field(default_factory=dict)

    @classmethod
    def discover(cls, overrides: Mapping[UserDir, Path | None] | None = None) -> "UserDirs | None":
        """Return the user folders, or ``None`` when there is no home directory."""
        home = _home_dir()
        if home is None:
            return None
        return cls(home_dir=home, overrides=dict(overrides or {}))

    def dir_for(self, kind: UserDir) -> Path | None:
        if kind is UserDir.HOME:
            return self.home_dir
        if kind in self.overrides:
            return self.overrides[kind]
        value = _PLATFORM_USER_DIRS[kind]()
        return Path(value) if value else None


@dataclass(frozen=True)
class ProjectDirs:
    """Config/data locations of one application, keyed by its reverse-DNS id.

    The id ``com.example.App`` has qualifier ``com``, organization
    ``example`` and application ``App``.
    """

    qualifier: str
    organization: str
    application: str
    config_dir_override: Path | None = None
    data_dir_override: Path | None = None

    @classmethod
    def from_id(
        cls,
        qualifier: str,
        organization: str,
        application: str,
        *,
        config_dir_override: Path | None = None,
        data_dir_override: Path | None = None,
    ) -> "ProjectDirs | None":
        if not application.strip():
            return None
        if _home_dir() is None and (config_dir_override is None or data_dir_override is None):
            return None
        return cls(
            qualifier=qualifier,
            organization=organization,
            application=application,
            config_dir_override=config_dir_override,
            data_dir_override=data_dir_override,
        )

    @property
    def app_id(self) -> str:
        return join_app_id(self.qualifier, self.organization, self.application)

    def config_dir(self) -> Path:
        return (
            self.config_dir_override
            if self.config_dir_override
            else Path(user_config_dir(self.application, appauthor=self.organization or False))
        )

    def data_dir(self) -> Path:
        return (
            self.data_dir_override
            if self.data_dir_override
            else Path(user_data_dir(self.application, appauthor=self.organization or False))
        )

    def dir_for(self, kind: ProjectDir) -> Path:
        if kind is ProjectDir.CONFIG:
            return self.config_dir()
        return self.data_dir()


@dataclass(frozen=True)
class DirectoryLookup:
    """Single entry point the location resolver uses to find base folders.

    Every field is optional; unset fields fall back to platform discovery.
    ``project_root`` relocates all application folders to
    ``project_root/<app id>/{config,data}``.
    """

    home_dir: Path | None = None
    user_dir_overrides: Mapping[UserDir, Path | None] = field(default_factory=dict)
    project_root: Path | None = None

    @classmethod
    def from_settings(cls, settings: Mapping[str, str | None]) -> "DirectoryLookup":
        """Build a lookup from resolved settings (see ``docman_core.config``)."""
        overrides: dict[UserDir, Path | None] = {}
        for kind in (UserDir.PICTURES, UserDir.VIDEOS, UserDir.DOWNLOADS, UserDir.DOCUMENTS):
            if value := settings.get(f"{kind.value}_dir"):
                overrides[kind] = Path(value).expanduser()
        home = settings.get("home_dir")
        project_root = settings.get("project_root")
        return cls(
            home_dir=Path(home).expanduser() if home else None,
            user_dir_overrides=overrides,
            project_root=Path(project_root).expanduser() if project_root else None,
        )

    def user_dirs(self) -> UserDirs | None:
        """Return the user folders.

        When ``home_dir`` is set, folders without an explicit override live
        directly under it (``home_dir/Pictures`` and so on) instead of the
        platform locations.
        """
        if self.home_dir is not None:
            overrides: dict[UserDir, Path | None] = {
                kind: self.home_dir / name for kind, name in _HOME_RELATIVE_DIRS.items()
            }
            overrides.update(self.user_dir_overrides)
            return UserDirs(home_dir=self.home_dir, overrides=overrides)
        return UserDirs.discover(self.user_dir_overrides)

    def project_dirs(self, qualifier: str, organization: str, application: str) -> ProjectDirs | None:
        if self.project_root is None:
            return ProjectDirs.from_id(qualifier, organization, application)
        app_root = self.project_root / join_app_id(qualifier, organization, application)
        return ProjectDirs.from_id(
            qualifier,
            organization,
            application,
            config_dir_override=app_root / "config",
            data_dir_override=app_root / "data",
        )
