"""
storage.py: Best-score persistence in a local SQLite file.
Storage problems are logged and swallowed; the game keeps running without them.
"""

import logging
import sqlite3
from typing import Optional

from .constants import DB_FILE

logger = logging.getLogger(__name__)

ROW_ID = 1


class ScoreStore:
    """Handles all interaction with the SQLite database."""

    def __init__(self, db_file: str = DB_FILE):
        self.conn: Optional[sqlite3.Connection] = None
        try:
            self.conn = sqlite3.connect(db_file)
            self.setup()
        except sqlite3.Error as e:
            logger.warning("Score storage unavailable (%s): %s", db_file, e)
            self.close()

    def setup(self):
        """Creates the table if it doesn't exist."""
        self.conn.execute("""
            CREATE TABLE IF NOT EXISTS Scores (
                id INTEGER PRIMARY KEY,
                best INTEGER DEFAULT 0
            )
        """)
        self.conn.commit()

    @property
    def available(self) -> bool:
        return self.conn is not None

    def get_best_score(self) -> int:
        """Stored best score, or 0 if absent or unreadable."""
        if not self.available:
            return 0
        try:
            row = self.conn.execute(
                "SELECT best FROM Scores WHERE id=?", (ROW_ID,)).fetchone()
        except sqlite3.Error as e:
            logger.warning("Could not read best score: %s", e)
            return 0

        if row is None:
            return 0
        try:
            return max(int(row[0]), 0)
        except (TypeError, ValueError):
            logger.warning("Ignoring unreadable best score %r", row[0])
            return 0

    def set_best_score(self, score: int):
        """Stores the score if it beats the stored best."""
        if not self.available:
            return
        try:
            self.conn.execute(
                "INSERT OR IGNORE INTO Scores (id, best) VALUES (?, 0)", (ROW_ID,))
            self.conn.execute(
                "UPDATE Scores SET best = MAX(best, ?) WHERE id=?", (score, ROW_ID))
            self.conn.commit()
        except sqlite3.Error as e:
            logger.warning("Could not save best score %d: %s", score, e)

    def close(self):
        if self.conn is not None:
            try:
                self.conn.close()
            except sqlite3.Error as e:
                logger.warning("Error closing score storage: %s", e)
            self.conn = None
