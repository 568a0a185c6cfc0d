"""Note store backed by a single SQLite file.

Notes are addressed by their position in the ordered list of unarchived
notes, not by id. A position is only meaningful against the listing it was
read from: inserting or archiving a note shifts the positions of the notes
after it.
"""

from __future__ import annotations

import logging
import sqlite3
from dataclasses import replace
from pathlib import Path
from types import TracebackType

from recall.core.errors import NotFoundError, StorageError, ValidationError
from recall.core.note import Note, TextContent
from recall.storage.db import connect, initialize_db
from recall.storage.repos import notes as notes_repo

logger = logging.getLogger(__name__)


class Store:
    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn: sqlite3.Connection | None = conn

    @classmethod
    def open(cls, db_path: Path) -> Store:
        conn = None
        try:
            db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = connect(db_path)
            initialize_db(conn)
        except (OSError, sqlite3.Error) as exc:
            if conn is not None:
                conn.close()
            raise StorageError(f"Could not open database {db_path}: {exc}") from exc
        logger.debug("Opened note store at %s", db_path)
        return cls(conn)

    def close(self) -> None:
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Store:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def insert(self, note: Note) -> Note:
        conn = self._connection()
        try:
            stored = notes_repo.add_note(conn, note)
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Could not save note '{note.title}': {exc}") from exc
        logger.debug("Inserted note %s (%s)", stored.id, stored.kind or "bare")
        return stored

    def list_notes(self) -> list[Note]:
        return self._ordered()

    def count(self) -> int:
        try:
            return notes_repo.count_unarchived(self._connection())
        except sqlite3.Error as exc:
            raise StorageError(f"Could not count notes: {exc}") from exc

    def index_of(self, note_id: int) -> int | None:
        """Current position of the note with `note_id`, or None if archived."""
        for position, note in enumerate(self._ordered()):
            if note.id == note_id:
                return position
        return None

    def read_nth(self, index: int) -> Note:
        return self._nth(self._ordered(), index)

    def archive(self, index: int) -> Note:
        note = self._nth(self._ordered(), index)
        conn = self._connection()
        try:
            notes_repo.set_archived(conn, _stored_id(note))
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Could not archive note '{note.title}': {exc}") from exc
        logger.debug("Archived note %s at index %s", note.id, index)
        return replace(note, archived=True)

    def update_text(self, index: int, text: str) -> Note:
        note = self._nth(self._ordered(), index)
        if not isinstance(note.content, TextContent):
            raise ValidationError(f"Note '{note.title}' is not a text note")
        content = TextContent(text)
        conn = self._connection()
        try:
            notes_repo.update_content(conn, _stored_id(note), content)
        except sqlite3.Error as exc:
            conn.rollback()
            raise StorageError(f"Could not update note '{note.title}': {exc}") from exc
        logger.debug("Updated text of note %s", note.id)
        return replace(note, content=content)

    def _ordered(self) -> list[Note]:
        try:
            return notes_repo.ordered_unarchived(self._connection())
        except sqlite3.Error as exc:
            raise StorageError(f"Could not read notes: {exc}") from exc

    def _nth(self, notes: list[Note], index: int) -> Note:
        if index < 0 or index >= len(notes):
            raise NotFoundError(index, len(notes))
        return notes[index]

    def _connection(self) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError("Note store is closed")
        return self._conn


def _stored_id(note: Note) -> int:
    if note.id is None:
        raise StorageError(f"Note '{note.title}' has no id")
    return note.id
