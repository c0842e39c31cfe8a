"""Tests for the document error taxonomy."""

from __future__ import annotations

import pytest

from docman_core import errors
from docman_core.errors import (
    AccessError,
    AliasNotFound,
    CreationError,
    DocumentError,
    FileNotFound,
    ResolutionError,
    UserDirsNotFound,
)


def test_messages_include_the_path() -> None:
    assert str(FileNotFound("/tmp/x")) == "File not found: /tmp/x"
    assert str(errors.CouldNotCreateParentFolder("/tmp")) == "Could not create parent folder: /tmp"
    assert str(errors.CouldNotLaunchFile("/a.png")) == "Could not launch file with default app: /a.png"
    assert str(UserDirsNotFound()) == "User directories not found"
    assert UserDirsNotFound().path is None


@pytest.mark.parametrize(
    "error_type, group",
    [
        (errors.UserDirsNotFound, ResolutionError),
        (errors.PicturesDirNotFound, ResolutionError),
        (errors.VideosDirNotFound, ResolutionError),
        (errors.DownloadsDirNotFound, ResolutionError),
        (errors.DocumentsDirNotFound, ResolutionError),
        (errors.ProjectDirsNotFound, ResolutionError),
        (errors.FileNotFound, CreationError),
        (errors.CouldNotCreateFile, CreationError),
        (errors.CouldNotCreateParentFolder, CreationError),
        (errors.CouldNotLaunchFile, AccessError),
        (errors.CouldNotOpenFile, AccessError),
        (errors.FileNotWritable, AccessError),
        (errors.FileNotOpen, AccessError),
        (errors.AliasNotFound, AccessError),
    ],
)
def test_error_groups(error_type: type, group: type) -> None:
    assert issubclass(error_type, group)
    assert issubclass(error_type, DocumentError)


def test_alias_not_found_is_a_key_error() -> None:
    error = AliasNotFound("shot")

    assert isinstance(error, KeyError)
    assert str(error) == "No document with alias: shot"
    assert error.path == "shot"
