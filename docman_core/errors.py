"""Errors raised while resolving, creating and accessing documents."""

from __future__ import annotations


class DocumentError(Exception):
    """Base type for document failures.

    ``path`` holds the offending path (or alias) when the failure is tied to
    one, and is appended to the message.
    """

    message = "Document error"

    def __init__(self, path: str | None = None) -> None:
        self.path = path
        super().__init__(path)

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.message}: {self.path}"


class ResolutionError(DocumentError):
    """A well-known directory is not available on this platform."""


class CreationError(DocumentError):
    """The creation policy could not be satisfied."""


class AccessError(DocumentError):
    """The document exists but could not be opened, written or launched."""


class UserDirsNotFound(ResolutionError):
    message = "User directories not found"


class PicturesDirNotFound(ResolutionError):
    message = "Pictures directory not found"


class VideosDirNotFound(ResolutionError):
    message = "Videos directory not found"


class DownloadsDirNotFound(ResolutionError):
    message = "Downloads directory not found"


class DocumentsDirNotFound(ResolutionError):
    message = "Documents directory not found"


class ProjectDirsNotFound(ResolutionError):
    message = "Project directories not found"


class FileNotFound(CreationError):
    message = "File not found"


class CouldNotCreateFile(CreationError):
    message = "Could not create file"


class CouldNotCreateParentFolder(CreationError):
    message = "Could not create parent folder"


class CouldNotLaunchFile(AccessError):
    message = "Could not launch file with default app"


class CouldNotOpenFile(AccessError):
    message = "Could not open file"


class FileNotWritable(AccessError):
    message = "File not writable"


class FileNotOpen(AccessError):
    message = "File not open"


class AliasNotFound(AccessError, KeyError):
    """Raised when a batch map is indexed with an alias it does not hold."""

    message = "No document with alias"
