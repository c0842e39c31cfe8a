"""Resolve well-known locations into documents and work on them in batches."""

from .batch import DISCARD_ALIAS, DocumentMap, with_documents
from .config import SettingsResolver, default_config_path, load_directory_lookup
from .document import Document, Mode, suggest_rename
from .errors import (
    AccessError,
    AliasNotFound,
    CouldNotCreateFile,
    CouldNotCreateParentFolder,
    CouldNotLaunchFile,
    CouldNotOpenFile,
    CreationError,
    DocumentError,
    DocumentsDirNotFound,
    DownloadsDirNotFound,
    FileNotFound,
    FileNotOpen,
    FileNotWritable,
    PicturesDirNotFound,
    ProjectDirsNotFound,
    ResolutionError,
    UserDirsNotFound,
    VideosDirNotFound,
)
from .locations import Location, Project, User
from .outcome import Outcome, as_outcome, attempt, catch
from .paths import DirectoryLookup, ProjectDir, ProjectDirs, UserDir, UserDirs
from .policy import Create, apply_policy, join_name, split_name

__all__ = [
    "DISCARD_ALIAS",
    "DocumentMap",
    "with_documents",
    "SettingsResolver",
    "default_config_path",
    "load_directory_lookup",
    "Document",
    "Mode",
    "suggest_rename",
    "AccessError",
    "AliasNotFound",
    "CouldNotCreateFile",
    "CouldNotCreateParentFolder",
    "CouldNotLaunchFile",
    "CouldNotOpenFile",
    "CreationError",
    "DocumentError",
    "DocumentsDirNotFound",
    "DownloadsDirNotFound",
    "FileNotFound",
    "FileNotOpen",
    "FileNotWritable",
    "PicturesDirNotFound",
    "ProjectDirsNotFound",
    "ResolutionError",
    "UserDirsNotFound",
    "VideosDirNotFound",
    "Location",
    "Project",
    "User",
    "Outcome",
    "as_outcome",
    "attempt",
    "catch",
    "DirectoryLookup",
    "ProjectDir",
    "ProjectDirs",
    "UserDir",
    "UserDirs",
    "Create",
    "apply_policy",
    "join_name",
    "split_name",
]
