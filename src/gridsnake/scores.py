# scores.py
"""
High-score stores. Both keep one score per name: recording a name that is
already present raises DuplicateNameError instead of overwriting it.
"""
from __future__ import annotations

import logging
import sqlite3
from typing import Dict, List, Protocol, Tuple

from .errors import DuplicateNameError

logger = logging.getLogger(__name__)


class ScoreStore(Protocol):
    def __len__(self) -> int:
        ...

    def __contains__(self, name: str) -> bool:
        ...

    def record(self, name: str, score: int) -> None:
        """Store `score` under `name`; raise DuplicateNameError if present."""
        ...

    def top(self, n: int = 10) -> List[Tuple[str, int]]:
        ...


class ScoreBoard:
    """In-memory store, lives as long as the process."""

    def __init__(self):
        self.scores: Dict[str, int] = {}

    def __len__(self) -> int:
        return len(self.scores)

    def __contains__(self, name: str) -> bool:
        return name in self.scores

    def record(self, name: str, score: int) -> None:
        if name in self.scores:
            raise DuplicateNameError(name)
        self.scores[name] = score
        logger.info("recorded %s: %d", name, score)

    def top(self, n: int = 10) -> List[Tuple[str, int]]:
        """Best scores first; ties keep insertion order."""
        ranked = sorted(self.scores.items(), key=lambda item: -item[1])
        return ranked[:n]


class SQLiteScoreBoard:
    """Same contract as ScoreBoard, persisted in a SQLite file."""

    def __init__(self, db_path: str = "scores.db"):
        self.db_path = db_path
        self.conn = sqlite3.connect(self.db_path)
        self._init_db()

    def _init_db(self):
        cursor = self.conn.cursor()
        cursor.execute('''
            CREATE TABLE IF NOT EXISTS scores (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                name TEXT NOT NULL UNIQUE,
                score INTEGER NOT NULL,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        ''')
        self.conn.commit()

    def __len__(self) -> int:
        cursor = self.conn.cursor()
        cursor.execute('SELECT COUNT(*) FROM scores')
        return cursor.fetchone()[0]

    def __contains__(self, name: str) -> bool:
        cursor = self.conn.cursor()
        cursor.execute('SELECT 1 FROM scores WHERE name = ?', (name,))
        return cursor.fetchone() is not None

    def record(self, name: str, score: int) -> None:
        cursor = self.conn.cursor()
        try:
            cursor.execute('''
                INSERT INTO scores (name, score) VALUES (?, ?)
            ''', (name, score))
        except sqlite3.IntegrityError as exc:
            self.conn.rollback()
            raise DuplicateNameError(name) from exc
        self.conn.commit()
        logger.info("recorded %s: %d (%s)", name, score, self.db_path)

    def top(self, n: int = 10) -> List[Tuple[str, int]]:
        cursor = self.conn.cursor()
        cursor.execute('''
            SELECT name, score FROM scores
            ORDER BY score DESC, id ASC
            LIMIT ?
        ''', (n,))
        return [(name, score) for name, score in cursor.fetchall()]

    def close(self):
        if self.conn:
            self.conn.close()
            self.conn = None
