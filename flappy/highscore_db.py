"""
highscore_db.py: Storage for the best score, keyed like a browser's localStorage.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE, HIGH_SCORE_KEY

logger = logging.getLogger(__name__)


def parse_score(raw: Optional[str]) -> int:
    """Converts a stored value to a score. Anything unusable counts as 0."""
    if raw is None:
        return 0
    try:
        value = int(str(raw).strip())
    except ValueError:
        logger.warning("Ignoring corrupted high score %r", raw)
        return 0
    if value < 0:
        logger.warning("Ignoring negative high score %r", raw)
        return 0
    return value


class HighScoreDB:
    """Key-value table in SQLite holding the best score as text."""

    def __init__(self, db_file: str = DB_FILE, key: str = HIGH_SCORE_KEY):
        self.key = key
        self.conn: Optional[sqlite3.Connection] = None
        self.cur: Optional[sqlite3.Cursor] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.cur = self.conn.cursor()
            self.setup()
        except sqlite3.Error:
            logger.exception("Could not open high score database %s, scores will not be kept", db_file)
            self.close()

    @property
    def available(self) -> bool:
        return self.conn is not None

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.cur.execute("""
            CREATE TABLE IF NOT EXISTS Settings (
                key TEXT PRIMARY KEY,
                value TEXT
            )
        """)
        self.conn.commit()

    def get(self) -> Optional[str]:
        self.cur.execute("SELECT value FROM Settings WHERE key=?", (self.key,))
        row = self.cur.fetchone()
        return row[0] if row else None

    def set(self, value: str):
        self.cur.execute(
            "INSERT OR REPLACE INTO Settings (key, value) VALUES (?, ?)", (self.key, value))
        self.conn.commit()

    def load(self) -> int:
        if not self.available:
            return 0
        try:
            raw = self.get()
        except sqlite3.Error:
            logger.exception("Could not read high score, starting from 0")
            return 0
        return parse_score(raw)

    def save(self, score: int):
        if not self.available:
            return
        try:
            self.set(str(score))
        except sqlite3.Error:
            logger.exception("Could not save high score %d", score)

    def close(self):
        if self.conn is not None:
            self.conn.close()
        self.conn = None
        self.cur = None


class MemoryHighScore:
    """In-process store for tests and runs without a database."""

    def __init__(self, raw: Optional[str] = None):
        self.raw = raw
        self.saved = []

    def load(self) -> int:
        return parse_score(self.raw)

    def save(self, score: int):
        self.raw = str(score)
        self.saved.append(score)
