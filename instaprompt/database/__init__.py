"""SQLite storage for InstaPrompt.

Usage:
    from instaprompt.database import get_db

    with get_db() as conn:
        prompts = list_prompts(conn)
"""

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from instaprompt.config import get_database_path

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS prompts (
    id TEXT PRIMARY KEY,
    name TEXT NOT NULL,
    content TEXT NOT NULL,
    category TEXT,
    created_at INTEGER NOT NULL,
    updated_at INTEGER NOT NULL
);

CREATE INDEX IF NOT EXISTS idx_prompts_created_at ON prompts (created_at);
CREATE INDEX IF NOT EXISTS idx_prompts_category ON prompts (category);
"""


def connect(db_path: Path | str | None = None) -> sqlite3.Connection:
    """Open a connection with dict-like rows."""
    path = db_path if db_path is not None else get_database_path()
    conn = sqlite3.connect(path)
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_db(db_path: Path | str | None = None) -> Iterator[sqlite3.Connection]:
    """Get a database connection, closed on exit."""
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()


def init_schema(conn: sqlite3.Connection) -> None:
    """Create tables and indexes if missing."""
    conn.executescript(SCHEMA)
    conn.commit()


def init_db(db_path: Path | str | None = None) -> None:
    """Create the database file and schema if missing."""
    path = Path(db_path) if db_path is not None else get_database_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    with get_db(path) as conn:
        init_schema(conn)
    logger.debug("[DB] Database ready at %s", path)


__all__ = ["SCHEMA", "connect", "get_db", "init_db", "init_schema"]
