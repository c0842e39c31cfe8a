"""Shared fixtures: a directory lookup rooted in the test's tmp_path."""

from __future__ import annotations

from pathlib import Path

import pytest

from docman_core.paths import DirectoryLookup, UserDir


@pytest.fixture
def home(tmp_path: Path) -> Path:
    return tmp_path / "home"


@pytest.fixture
def lookup(tmp_path: Path, home: Path) -> DirectoryLookup:
    return DirectoryLookup(
        home_dir=home,
        user_dir_overrides={
            UserDir.PICTURES: home / "Pictures",
            UserDir.VIDEOS: home / "Videos",
            UserDir.DOWNLOADS: home / "Downloads",
            UserDir.DOCUMENTS: home / "Documents",
        },
        project_root=tmp_path / "projects",
    )
