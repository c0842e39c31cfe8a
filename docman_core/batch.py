"""Run one unit of work over several documents at once."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, Iterator, Sequence, Union

from .document import Document
from .errors import AliasNotFound, DocumentError
from .outcome import Outcome, catch

__all__ = ["DISCARD_ALIAS", "DocumentMap", "with_documents"]

# Documents with this alias are still constructed but never enter the map.
DISCARD_ALIAS = "_"

DocumentEntry = Union[Outcome[Document], Document]


class DocumentMap(Mapping[str, Document]):
    """Read-only alias to document mapping handed to batch callbacks."""

    def __init__(self, documents: Mapping[str, Document] | None = None) -> None:
        self._documents: dict[str, Document] = dict(documents or {})

    def __getitem__(self, alias: str) -> Document:
        try:
            return self._documents[alias]
        except KeyError:
            raise AliasNotFound(alias) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._documents)

    def __len__(self) -> int:
        return len(self._documents)

    def __repr__(self) -> str:
        return f"DocumentMap({sorted(self._documents)!r})"


def with_documents(
    documents: Sequence[DocumentEntry],
    callback: Callable[[DocumentMap], Any],
    *,
    logger: logging.Logger | None = None,
) -> Outcome[Any]:
    """Call ``callback`` with every document keyed by alias.

    Entries are checked in order and the first failed construction stops the
    batch: it is logged, the callback is not called and later entries are
    ignored. Failures raised or returned by the callback are logged as well.
    Nothing is raised to the caller; the returned ``Outcome`` tells what
    happened.
    """
    log = logger or logging.getLogger(__name__)
    collected: dict[str, Document] = {}
    for entry in documents:
        if isinstance(entry, Outcome):
            if entry.error is not None:
                log.error("%s", entry.error)
                return Outcome.failure(entry.error)
            document = entry.value
        else:
            document = entry
        if not isinstance(document, Document):
            error = DocumentError(f"not a document: {document!r}")
            log.error("%s", error)
            return Outcome.failure(error)
        if document.alias != DISCARD_ALIAS:
            collected[document.alias] = document

    run = catch(callback, lambda error: log.error("%s", error))
    return run(DocumentMap(collected))
