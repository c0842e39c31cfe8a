"""Tests for the grouped document accessor."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from docman_core.batch import DISCARD_ALIAS, DocumentMap, with_documents
from docman_core.document import Document
from docman_core.errors import AliasNotFound, DocumentError, FileNotFound
from docman_core.locations import User
from docman_core.outcome import Outcome, attempt
from docman_core.paths import DirectoryLookup
from docman_core.policy import Create


def _document(tmp_path: Path, name: str, alias: str | None = None) -> Outcome[Document]:
    return attempt(
        Document.from_path, tmp_path / name, alias or name, Create.ONLY_IF_NOT_EXISTS
    )


def test_callback_receives_documents_by_alias(tmp_path: Path) -> None:
    seen: dict[str, Path] = {}

    def callback(documents: DocumentMap) -> str:
        for alias, document in documents.items():
            seen[alias] = document.path
        documents["page"].append(b"<html>")
        return "done"

    outcome = with_documents(
        [_document(tmp_path, "page.html", "page"), _document(tmp_path, "cookies.sqlite")],
        callback,
    )

    assert outcome.ok
    assert outcome.value == "done"
    assert seen == {
        "page": tmp_path / "page.html",
        "cookies.sqlite": tmp_path / "cookies.sqlite",
    }
    assert (tmp_path / "page.html").read_bytes() == b"<html>"


def test_first_failure_aborts_the_batch(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    called = False

    def callback(_: DocumentMap) -> None:
        nonlocal called
        called = True

    failed = attempt(Document.from_path, tmp_path / "missing.txt", "missing")
    later = Outcome.failure(RuntimeError("never inspected"))

    with caplog.at_level(logging.ERROR):
        outcome = with_documents([_document(tmp_path, "a.txt"), failed, later], callback)

    assert called is False
    assert not outcome.ok
    assert isinstance(outcome.error, FileNotFound)
    assert "File not found" in caplog.text
    assert "never inspected" not in caplog.text
    assert (tmp_path / "a.txt").exists()


def test_entry_without_a_document_aborts_the_batch(caplog: pytest.LogCaptureFixture) -> None:
    called = False

    def callback(_: DocumentMap) -> None:
        nonlocal called
        called = True

    with caplog.at_level(logging.ERROR):
        outcome = with_documents([attempt(lambda: None)], callback)

    assert called is False
    assert isinstance(outcome.error, DocumentError)
    assert "not a document: None" in caplog.text


def test_discard_alias_is_created_but_not_mapped(lookup: DirectoryLookup, home: Path) -> None:
    keys: list[str] = []
    discarded = attempt(
        Document.at,
        User.pictures("Screenshot"),
        "Screenshot.png",
        Create.AUTO_RENAME_IF_EXISTS,
        alias=DISCARD_ALIAS,
        lookup=lookup,
    )

    outcome = with_documents([discarded], lambda documents: keys.extend(documents))

    assert outcome.ok
    assert keys == []
    assert (home / "Pictures" / "Screenshot" / "Screenshot.png").is_file()


def test_callback_exception_is_logged_not_raised(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    def callback(_: DocumentMap) -> None:
        raise OSError("disk full")

    with caplog.at_level(logging.ERROR):
        outcome = with_documents([_document(tmp_path, "a.txt")], callback)

    assert not outcome.ok
    assert "disk full" in caplog.text


def test_callback_returning_failure_is_logged(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    with caplog.at_level(logging.ERROR):
        outcome = with_documents(
            [_document(tmp_path, "a.txt")],
            lambda _: Outcome.failure(ValueError("bad payload")),
        )

    assert not outcome.ok
    assert "bad payload" in caplog.text


def test_unknown_alias_inside_callback(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    def callback(documents: DocumentMap) -> None:
        assert "other" not in documents
        assert documents.get("other") is None
        documents["other"].append(b"x")

    with caplog.at_level(logging.ERROR):
        outcome = with_documents([_document(tmp_path, "a.txt")], callback)

    assert isinstance(outcome.error, AliasNotFound)
    assert isinstance(outcome.error, KeyError)
    assert "No document with alias: other" in caplog.text


def test_custom_logger_receives_failures(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    custom = logging.getLogger("browser.downloads")

    with caplog.at_level(logging.ERROR, logger="browser.downloads"):
        with_documents(
            [attempt(Document.from_path, tmp_path / "missing.txt", "missing")],
            lambda _: None,
            logger=custom,
        )

    assert [record.name for record in caplog.records] == ["browser.downloads"]


def test_plain_documents_and_duplicate_aliases(tmp_path: Path) -> None:
    first = Document.from_path(tmp_path / "one.txt", "log", Create.ONLY_IF_NOT_EXISTS)
    second = Document.from_path(tmp_path / "two.txt", "log", Create.ONLY_IF_NOT_EXISTS)
    captured: list[DocumentMap] = []

    with_documents([first, second], captured.append)

    assert len(captured[0]) == 1
    assert captured[0]["log"] is second


def test_document_map_is_read_only_mapping(tmp_path: Path) -> None:
    document = Document(alias="a", path=tmp_path / "a.txt")
    documents = DocumentMap({"a": document})

    assert list(documents) == ["a"]
    assert documents["a"] is document
    with pytest.raises(TypeError):
        documents["b"] = document  # type: ignore[index]
