"""Layered settings for directory overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import tomllib
from platformdirs import user_config_dir

from .paths import DirectoryLookup

DEFAULT_APP_NAME = "docman"
CONFIG_FILE_NAME = "config.toml"

SETTING_KEYS: tuple[str, ...] = (
    "home_dir",
    "pictures_dir",
    "videos_dir",
    "downloads_dir",
    "documents_dir",
    "project_root",
)
_ENV_KEY_MAP: dict[str, str] = {
    "home_dir": "DOCMAN_HOME",
    "pictures_dir": "DOCMAN_PICTURES_DIR",
    "videos_dir": "DOCMAN_VIDEOS_DIR",
    "downloads_dir": "DOCMAN_DOWNLOADS_DIR",
    "documents_dir": "DOCMAN_DOCUMENTS_DIR",
    "project_root": "DOCMAN_PROJECT_ROOT",
}
CONFIG_ENV_VAR = "DOCMAN_CONFIG"


def default_config_path() -> Path:
    """Return the platform-specific default config path."""

    base_dir = Path(user_config_dir(DEFAULT_APP_NAME, appauthor=False))
    return base_dir / CONFIG_FILE_NAME


def _load_config_from_file(path: Path) -> dict[str, str]:
    if not path.exists():
        return {}
    try:
        with path.open("rb") as handle:
            data: dict[str, Any] = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError):
        return {}
    table = data.get("dirs")
    if isinstance(table, dict):
        data = {**data, **table}
    return {key: str(data[key]) for key in SETTING_KEYS if key in data}


@dataclass
class SettingsResolver:
    """Resolve settings using overrides, env, config file, defaults order."""

    overrides: Mapping[str, str] | None = None
    env: Mapping[str, str] | None = None
    config_path: Path | None = None
    defaults: Mapping[str, str] | None = None

    def __post_init__(self) -> None:
        self.overrides = dict(self.overrides or {})
        self.env = os.environ if self.env is None else self.env
        if self.config_path is None:
            configured = self.env.get(CONFIG_ENV_VAR)
            self.config_path = Path(configured) if configured else default_config_path()
        self.defaults = dict(self.defaults or {})

    def resolve_setting(self, key: str) -> str | None:
        if value := self.overrides.get(key):
            return value
        if value := self._env_value(key):
            return value
        if value := self._file_layer().get(key):
            return value
        return self.defaults.get(key)

    def resolve_all(self) -> dict[str, str | None]:
        return {key: self.resolve_setting(key) for key in SETTING_KEYS}

    def directory_lookup(self) -> DirectoryLookup:
        return DirectoryLookup.from_settings(self.resolve_all())

    def _env_value(self, key: str) -> str | None:
        alias = _ENV_KEY_MAP.get(key)
        if alias:
            return self.env.get(alias) or None
        return None

    def _file_layer(self) -> dict[str, str]:
        return _load_config_from_file(self.config_path)


def load_directory_lookup(**kwargs: Any) -> DirectoryLookup:
    """Shortcut for ``SettingsResolver(**kwargs).directory_lookup()``."""
    return SettingsResolver(**kwargs).directory_lookup()
