"""
Database module for Notiflog.

Append-only SQLite log of captured notifications.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from pydantic import BaseModel, ConfigDict

from notiflog.config import get_db_path

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS logs (
    id INTEGER PRIMARY KEY,
    title TEXT,
    text TEXT,
    time TEXT                               -- yyyy-MM-dd HH:mm:ss, local time of capture
)
"""


class LogEntry(BaseModel):
    """One captured notification. Never modified after it is appended."""

    model_config = ConfigDict(frozen=True)

    id: int
    title: str
    text: str
    time: str


class LogStore:
    """SQLite log store for captured notifications."""

    def __init__(self, db_path: Path | None = None):
        self.db_path = Path(db_path) if db_path is not None else get_db_path()
        self.ensure_schema()

    def ensure_schema(self) -> None:
        """Create the logs table if it is missing. Safe to call on every startup."""
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        with self._connect() as conn:
            conn.execute(SCHEMA)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections."""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
            conn.commit()
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def append(self, title: str, text: str, time: str) -> int:
        """Insert a log row. Returns the assigned id."""
        with self._connect() as conn:
            cursor = conn.execute(
                "INSERT INTO logs (title, text, time) VALUES (?, ?, ?)",
                (title, text, time),
            )
            entry_id = cursor.lastrowid

        logger.debug("Appended log %s: %r", entry_id, title)
        return entry_id

    def list_all(self) -> list[LogEntry]:
        """Get every log row, most recent first."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT id, title, text, time FROM logs ORDER BY id DESC"
            ).fetchall()
            return [LogEntry(**dict(row)) for row in rows]

    def count(self) -> int:
        """Get the number of stored rows."""
        with self._connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM logs").fetchone()[0]
