"""
Chat history log backed by SQLite, with an in-memory fallback.

Append-only apart from ``clear``; reads return the newest messages in
chronological order.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from typing import List, Optional

from src.core.models import ChatMessage

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS chat_messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    timestamp TEXT NOT NULL,
    role TEXT NOT NULL,
    message TEXT NOT NULL,
    product_id TEXT,
    product_name TEXT,
    category_path TEXT
);

CREATE INDEX IF NOT EXISTS idx_timestamp ON chat_messages(timestamp);
"""


class ChatHistoryStore:
    """
    Persists chat messages for the kiosk.

    If the database cannot be opened, or a write fails, messages are kept in
    memory for the lifetime of the process instead. A failed write carries the
    history saved so far over into memory.
    """

    def __init__(self, db_path: Optional[str] = None):
        """
        Args:
            db_path: SQLite file; None keeps everything in memory
        """
        self.db_path = Path(db_path) if db_path else None
        self._conn: Optional[sqlite3.Connection] = None
        self._lock = threading.Lock()
        self._memory: List[ChatMessage] = []
        self._init_database()

    @property
    def is_persistent(self) -> bool:
        return self._conn is not None

    def _init_database(self) -> None:
        if self.db_path is None:
            logger.warning("No chat database configured - using in-memory storage")
            return
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(self.db_path, check_same_thread=False, timeout=30.0)
            conn.row_factory = sqlite3.Row
            conn.executescript(_SCHEMA)
            conn.commit()
            self._conn = conn
            logger.info(f"Chat database initialized at {self.db_path}")
        except (OSError, sqlite3.Error) as e:
            logger.error(f"Error initializing chat database {self.db_path}: {e}")
            logger.warning("Falling back to in-memory storage")
            self._conn = None

    def _remember(self, message: ChatMessage) -> ChatMessage:
        next_id = (self._memory[-1].id or 0) + 1 if self._memory else 1
        stored = message.model_copy(update={"id": next_id})
        self._memory.append(stored)
        return stored

    @staticmethod
    def _row_to_message(row: sqlite3.Row) -> ChatMessage:
        return ChatMessage(
            id=row["id"],
            timestamp=row["timestamp"],
            role=row["role"],
            message=row["message"],
            product_id=row["product_id"],
            product_name=row["product_name"],
            category_path=row["category_path"],
        )

    def _switch_to_memory(self) -> None:
        """Drop the database for the rest of the process, keeping what it still returns."""
        try:
            rows = self._conn.execute("SELECT * FROM chat_messages ORDER BY timestamp, id").fetchall()
            self._memory = [self._row_to_message(row) for row in rows]
        except sqlite3.Error as e:
            logger.error(f"Error copying chat history into memory: {e}")
        try:
            self._conn.close()
        except sqlite3.Error as e:
            logger.warning(f"Error closing chat database: {e}")
        self._conn = None
        logger.warning("Falling back to in-memory storage")

    def save_message(self, message: ChatMessage) -> ChatMessage:
        """Append a message and return it with its id set."""
        with self._lock:
            if self._conn is None:
                return self._remember(message)
            try:
                cursor = self._conn.execute(
                    """
                    INSERT INTO chat_messages (timestamp, role, message, product_id, product_name, category_path)
                    VALUES (?, ?, ?, ?, ?, ?)
                    """,
                    (
                        message.timestamp,
                        message.role,
                        message.message,
                        message.product_id,
                        message.product_name,
                        message.category_path,
                    ),
                )
                self._conn.commit()
                return message.model_copy(update={"id": cursor.lastrowid})
            except sqlite3.Error as e:
                logger.error(f"Error saving chat message: {e}")
                self._switch_to_memory()
                return self._remember(message)

    def get_history(self, limit: int = 100) -> List[ChatMessage]:
        """The last ``limit`` messages, oldest first."""
        if limit <= 0:
            return []
        with self._lock:
            if self._conn is None:
                return list(self._memory[-limit:])
            try:
                rows = self._conn.execute(
                    "SELECT * FROM chat_messages ORDER BY timestamp DESC, id DESC LIMIT ?",
                    (limit,),
                ).fetchall()
            except sqlite3.Error as e:
                logger.error(f"Error getting chat history: {e}")
                return list(self._memory[-limit:])

        return [self._row_to_message(row) for row in reversed(rows)]

    def clear(self) -> None:
        with self._lock:
            self._memory = []
            if self._conn is None:
                return
            try:
                self._conn.execute("DELETE FROM chat_messages")
                self._conn.commit()
            except sqlite3.Error as e:
                logger.error(f"Error clearing chat history: {e}")

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                try:
                    self._conn.close()
                except sqlite3.Error as e:
                    logger.warning(f"Error closing chat database: {e}")
                finally:
                    self._conn = None
