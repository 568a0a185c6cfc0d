"""Notes repository."""

from __future__ import annotations

import logging
import sqlite3

from recall.core.errors import StorageError
from recall.core.note import Note, NoteContent, content_columns, content_from_columns

logger = logging.getLogger(__name__)

_COLUMNS = "id, created_at, archived, title, path, link, text"


def add_note(conn: sqlite3.Connection, note: Note) -> Note:
    path, link, text = content_columns(note.content)
    cursor = conn.execute(
        "INSERT INTO notes (created_at, archived, title, path, link, text) "
        "VALUES (?, ?, ?, ?, ?, ?)",
        (note.created_at, note.archived, note.title, path, link, text),
    )
    conn.commit()
    return note.with_id(cursor.lastrowid)


def ordered_unarchived(conn: sqlite3.Connection) -> list[Note]:
    """All unarchived notes in the order positional indices refer to."""
    rows = conn.execute(
        f"SELECT {_COLUMNS} FROM notes WHERE archived = FALSE "
        "ORDER BY created_at, id"
    ).fetchall()
    return [_row_to_note(row) for row in rows]


def count_unarchived(conn: sqlite3.Connection) -> int:
    return conn.execute(
        "SELECT COUNT(*) FROM notes WHERE archived = FALSE"
    ).fetchone()[0]


def set_archived(conn: sqlite3.Connection, note_id: int) -> None:
    conn.execute("UPDATE notes SET archived = TRUE WHERE id = ?", (note_id,))
    conn.commit()


def update_content(
    conn: sqlite3.Connection, note_id: int, content: NoteContent | None
) -> None:
    path, link, text = content_columns(content)
    conn.execute(
        "UPDATE notes SET path = ?, link = ?, text = ? WHERE id = ?",
        (path, link, text, note_id),
    )
    conn.commit()


def _row_to_note(row: sqlite3.Row) -> Note:
    try:
        content = content_from_columns(row[4], row[5], row[6])
    except ValueError as exc:
        logger.warning("Rejecting note row %s: %s", row[0], exc)
        raise StorageError(f"Note row {row[0]} is corrupt: {exc}") from exc
    return Note(
        id=row[0],
        created_at=row[1],
        archived=bool(row[2]),
        title=row[3],
        content=content,
    )
