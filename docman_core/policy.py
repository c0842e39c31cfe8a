"""Creation policies applied when a document is constructed."""

from __future__ import annotations

import logging
import re
from enum import Enum
from pathlib import Path

from .errors import CouldNotCreateFile, CouldNotCreateParentFolder, FileNotFound

__all__ = ["Create", "split_name", "join_name", "apply_policy"]

logger = logging.getLogger(__name__)

_DUPLICATE_MARKER = re.compile(r"^(?P<base>.*)\((?P<number>\d+)\)$")


class Create(Enum):
    NO = "no"
    ONLY_IF_NOT_EXISTS = "only_if_not_exists"
    AUTO_RENAME_IF_EXISTS = "auto_rename_if_exists"


def split_name(name: str) -> tuple[str, int | None, str | None]:
    """Split ``Screenshot(2).png`` into ``("Screenshot", 2, ".png")``.

    The extension is the last suffix (``.gz`` for ``a.tar.gz``); a leading dot
    does not start an extension. Names without a trailing ``(n)`` marker get
    ``None`` as the number.
    """
    extension = Path(name).suffix or None
    stem = name[: -len(extension)] if extension else name
    match = _DUPLICATE_MARKER.match(stem)
    if match is None:
        return stem, None, extension
    return match.group("base"), int(match.group("number")), extension


def join_name(base: str, number: int | None, extension: str | None) -> str:
    marker = f"({number})" if number is not None else ""
    return f"{base}{marker}{extension or ''}"


def _ensure_parent(path: Path) -> None:
    parent = path.parent
    try:
        parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise CouldNotCreateParentFolder(str(parent)) from exc


def _create_exclusive(path: Path) -> None:
    try:
        with path.open("xb"):
            pass
    except OSError as exc:
        raise CouldNotCreateFile(str(path)) from exc
    logger.debug("created %s", path)


def _next_free_path(path: Path) -> Path:
    base, number, extension = split_name(path.name)
    counter = number or 0
    candidate = path
    while candidate.exists():
        counter += 1
        candidate = path.with_name(join_name(base, counter, extension))
    return candidate


def _create_renamed(path: Path) -> Path:
    candidate = _next_free_path(path)
    while True:
        try:
            with candidate.open("xb"):
                pass
        except FileExistsError:
            # lost a race for this name; look for the next one
            candidate = _next_free_path(candidate)
            continue
        except OSError as exc:
            raise CouldNotCreateFile(str(candidate)) from exc
        break
    if candidate != path:
        logger.info("%s exists, created %s instead", path.name, candidate.name)
    else:
        logger.debug("created %s", candidate)
    return candidate


def apply_policy(path: Path, create: Create, *, dry_run: bool = False) -> Path:
    """Apply ``create`` to ``path`` and return the path the document will use.

    With ``dry_run`` nothing is created; the returned path is what a real run
    would pick at this moment.
    """
    path = Path(path)
    if create is Create.ONLY_IF_NOT_EXISTS:
        if not dry_run:
            _ensure_parent(path)
            if not path.exists():
                _create_exclusive(path)
    elif create is Create.AUTO_RENAME_IF_EXISTS:
        if dry_run:
            return _next_free_path(path)
        _ensure_parent(path)
        path = _create_renamed(path)

    if not dry_run and not path.exists():
        raise FileNotFound(str(path))
    return path
