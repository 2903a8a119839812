"""Chunk repository for database operations."""

import sqlite3
from typing import Optional

from common.logging_config import get_logger
from store.database import Database

logger = get_logger(__name__)


class ChunkRepository:
    def __init__(self, db: Database):
        self.db = db

    @staticmethod
    def insert_chunk(entry_id: str, chunk_index: int, data: bytes, conn: sqlite3.Connection) -> None:
        conn.execute(
            """
            INSERT INTO entries_data (id, chunk_index, chunk)
            VALUES (?, ?, ?)
            """,
            (entry_id, chunk_index, sqlite3.Binary(data))
        )

    def get_chunk(self, entry_id: str, chunk_index: int) -> Optional[bytes]:
        """
        Fetch one chunk's payload, or None when the entry has no such chunk.
        """
        logger.debug(f"Fetching chunk [entry_id={entry_id}, chunk_index={chunk_index}]")
        with self.db.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT chunk FROM entries_data WHERE id = ? AND chunk_index = ?",
                (entry_id, chunk_index)
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return bytes(row["chunk"])

    @staticmethod
    def delete_chunks(entry_id: str, conn: sqlite3.Connection) -> int:
        cursor = conn.execute("DELETE FROM entries_data WHERE id = ?", (entry_id,))
        return cursor.rowcount
