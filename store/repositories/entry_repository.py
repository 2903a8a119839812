"""Entry metadata repository for database operations."""

import sqlite3
from datetime import datetime
from typing import List, Optional

from common.logging_config import get_logger
from common.types import EntryMetadata
from store.database import Database
from store.exceptions import EntryAlreadyExistsError
from store.timecodec import format_time, parse_time

logger = get_logger(__name__)

# size is not stored on the entry row; it is summed from the chunk rows.
SELECT_METADATA = """
    SELECT
        e.id,
        e.filename,
        e.upload_time,
        e.expiration_time,
        COALESCE(
            (SELECT SUM(LENGTH(d.chunk)) FROM entries_data d WHERE d.id = e.id),
            0
        ) AS size
    FROM entries e
"""


def _row_to_metadata(row: sqlite3.Row) -> EntryMetadata:
    return EntryMetadata(
        entry_id=row["id"],
        filename=row["filename"],
        uploaded=parse_time(row["upload_time"]),
        expires=parse_time(row["expiration_time"]),
        size=row["size"],
    )


class EntryRepository:
    def __init__(self, db: Database):
        self.db = db

    def list_all(self) -> List[EntryMetadata]:
        """
        Return metadata for every entry, expired or not.
        """
        with self.db.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(SELECT_METADATA + " ORDER BY e.upload_time, e.id")
            rows = cursor.fetchall()

            return [_row_to_metadata(row) for row in rows]

    def get_active(self, entry_id: str, now: datetime) -> Optional[EntryMetadata]:
        """
        Return metadata for entry_id if it exists and has not expired at now.
        """
        with self.db.connection() as conn:
            cursor = conn.cursor()
            cursor.execute(
                SELECT_METADATA + " WHERE e.id = ? AND e.expiration_time >= ?",
                (entry_id, format_time(now))
            )
            row = cursor.fetchone()

            if row is None:
                return None

            return _row_to_metadata(row)

    @staticmethod
    def create(metadata: EntryMetadata, conn: sqlite3.Connection) -> None:
        logger.debug(f"Creating entry row [entry_id={metadata.entry_id}]")
        try:
            conn.execute(
                """
                INSERT INTO entries (id, filename, upload_time, expiration_time)
                VALUES (?, ?, ?, ?)
                """,
                (
                    metadata.entry_id,
                    metadata.filename,
                    format_time(metadata.uploaded),
                    format_time(metadata.expires),
                )
            )
        except sqlite3.IntegrityError as e:
            raise EntryAlreadyExistsError(metadata.entry_id) from e

    @staticmethod
    def delete(entry_id: str, conn: sqlite3.Connection) -> int:
        cursor = conn.execute("DELETE FROM entries WHERE id = ?", (entry_id,))
        return cursor.rowcount

    @staticmethod
    def list_expired_ids(now: datetime, conn: sqlite3.Connection) -> List[str]:
        cursor = conn.execute(
            "SELECT id FROM entries WHERE expiration_time < ? ORDER BY id",
            (format_time(now),)
        )
        return [row["id"] for row in cursor.fetchall()]
