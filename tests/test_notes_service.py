from __future__ import annotations

import pytest

from recall.core.errors import ValidationError
from recall.core.note import LinkContent, Note, PathContent, TextContent
from recall.tools.local.notes import NotesService
from recall.utils.time import now_ms


@pytest.fixture
def service(store, editor, opener) -> NotesService:
    return NotesService(store, editor, opener)


def test_add_with_each_content_flag(service) -> None:
    service.add("bare")
    service.add("file", path="/tmp/a.txt")
    service.add("site", link="https://x/y")
    service.add("memo", text="hello")
    assert [note.content for note in service.list_notes()] == [
        None,
        PathContent("/tmp/a.txt"),
        LinkContent("https://x/y"),
        TextContent("hello"),
    ]


def test_add_rejects_two_content_flags(service) -> None:
    with pytest.raises(ValidationError, match="--path, --link"):
        service.add("x", path="/a", link="https://b")
    assert service.count() == 0


def test_add_with_edit_uses_editor(service, editor) -> None:
    editor.result = "written in editor"
    note = service.add("journal", edit=True)
    assert editor.calls == [""]
    assert note.content == TextContent("written in editor")
    assert service.list_notes()[0].content == TextContent("written in editor")


def test_add_with_edit_and_content_flag_rejected(service, editor) -> None:
    with pytest.raises(ValidationError, match="--edit"):
        service.add("journal", text="x", edit=True)
    assert editor.calls == []


def test_show_opens_links_and_paths(service, opener) -> None:
    service.add("site", link="https://x/y")
    service.add("file", path="/tmp/a.txt")
    service.add("memo", text="hello")
    assert service.show(0).title == "site"
    assert service.show(1).title == "file"
    assert service.show(2).title == "memo"
    assert opener.targets == ["https://x/y", "/tmp/a.txt"]


def test_edit_writes_text_back(service, editor) -> None:
    service.add("memo", text="draft")
    editor.result = "final"
    edited = service.edit(0)
    assert editor.calls == ["draft"]
    assert edited.content == TextContent("final")
    assert service.show(0).content == TextContent("final")


def test_edit_unchanged_text_skips_update(service, editor) -> None:
    stored = service.add("memo", text="same")
    editor.result = "same"
    assert service.edit(0) == stored


def test_edit_rejects_non_text_note(service, editor) -> None:
    service.add("site", link="https://x/y")
    with pytest.raises(ValidationError, match="link note"):
        service.edit(0)
    assert editor.calls == []


def test_archive_out_of_range_returns_none(service) -> None:
    service.add("a")
    assert service.archive(3) is None
    assert service.count() == 1


def test_archive_returns_archived_note(service) -> None:
    service.add("a")
    service.add("b")
    archived = service.archive(0)
    assert isinstance(archived, Note)
    assert archived.title == "a"
    assert [note.title for note in service.list_notes()] == ["b"]


def test_index_of_follows_listing_order(service, store) -> None:
    store.insert(Note(title="later", created_at=now_ms() + 3_600_000))
    added = service.add("earlier")
    assert service.index_of(added) == 0
    assert service.index_of(service.list_notes()[1]) == 1


def test_index_of_archived_or_unsaved_note(service) -> None:
    added = service.add("a")
    service.archive(0)
    assert service.index_of(added) is None
    assert service.index_of(Note(title="transient", created_at=0)) is None
