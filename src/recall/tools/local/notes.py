"""Notes operations behind the command line."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from recall.core.errors import NotFoundError, ValidationError
from recall.core.note import (
    Note,
    TextContent,
    new_note,
    new_note_with_link,
    new_note_with_path,
    new_note_with_text,
    open_target,
)
from recall.storage.store import Store
from recall.tools.local.editor import Editor
from recall.tools.local.opener import Opener

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class NotesService:
    store: Store
    editor: Editor
    opener: Opener

    def add(
        self,
        title: str,
        path: str | None = None,
        link: str | None = None,
        text: str | None = None,
        edit: bool = False,
    ) -> Note:
        given = [
            name
            for name, value in (("--path", path), ("--link", link), ("--text", text))
            if value is not None
        ]
        if edit and given:
            raise ValidationError(
                "--edit with a note title creates a new text note in the editor; "
                f"it cannot be combined with {', '.join(given)}"
            )
        if len(given) > 1:
            raise ValidationError(f"Only one of {', '.join(given)} may be given")

        if edit:
            note = new_note_with_text(title, self.editor.edit_text(""))
        elif path is not None:
            note = new_note_with_path(title, path)
        elif link is not None:
            note = new_note_with_link(title, link)
        elif text is not None:
            note = new_note_with_text(title, text)
        else:
            note = new_note(title)
        return self.store.insert(note)

    def list_notes(self) -> list[Note]:
        return self.store.list_notes()

    def count(self) -> int:
        return self.store.count()

    def index_of(self, note: Note) -> int | None:
        if note.id is None:
            return None
        return self.store.index_of(note.id)

    def show(self, index: int) -> Note:
        note = self.store.read_nth(index)
        target = open_target(note)
        if target is not None:
            self.opener.open(target)
        return note

    def edit(self, index: int) -> Note:
        note = self.store.read_nth(index)
        if not isinstance(note.content, TextContent):
            kind = f"a {note.kind} note" if note.kind else "a note without content"
            raise ValidationError(
                f"Only text notes can be edited; '{note.title}' is {kind}"
            )
        new_text = self.editor.edit_text(note.content.value)
        if new_text == note.content.value:
            logger.debug("Text of note %s unchanged", note.id)
            return note
        return self.store.update_text(index, new_text)

    def archive(self, index: int) -> Note | None:
        try:
            return self.store.archive(index)
        except NotFoundError:
            logger.debug("Nothing to archive at index %s", index)
            return None
