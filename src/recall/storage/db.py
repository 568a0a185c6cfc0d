"""SQLite database helpers."""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).resolve().parent / "migrations"


def connect(db_path: Path) -> sqlite3.Connection:
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def initialize_db(conn: sqlite3.Connection) -> None:
    _apply_migrations(conn, MIGRATIONS_DIR)


def _apply_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    if not migrations_dir.exists():
        return
    for migration in sorted(migrations_dir.glob("*.sql")):
        logger.debug("Applying schema %s", migration.name)
        conn.executescript(migration.read_text(encoding="utf-8"))
    conn.commit()
