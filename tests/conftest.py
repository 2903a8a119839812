"""Shared pytest fixtures for all tests."""

from datetime import datetime, timezone
from pathlib import Path
from typing import List

import pytest

from common.types import EntryMetadata
from store.database import Database
from store.services.entry_store import EntryStore

NOW = datetime(2030, 6, 15, 12, 0, 0, tzinfo=timezone.utc)
FAR_FUTURE = datetime(2099, 1, 1, tzinfo=timezone.utc)
SMALL_CHUNK_SIZE = 16


@pytest.fixture
def db_path(tmp_path) -> Path:
    """
    Path of a fresh database file inside pytest's tmp_path.
    """
    return tmp_path / "data" / "store.db"


@pytest.fixture
def db(db_path) -> Database:
    """
    Database handle with the schema already created.
    """
    database = Database(db_path)
    database.init_schema()
    return database


@pytest.fixture
def store(db) -> EntryStore:
    """
    EntryStore with a tiny chunk size and a clock frozen at NOW.
    """
    return EntryStore(db, chunk_size=SMALL_CHUNK_SIZE, clock=lambda: NOW)


@pytest.fixture
def make_metadata():
    """
    Factory for EntryMetadata with sensible defaults.
    """
    def _make(
        entry_id: str = "entry-1",
        filename: str = "notes.txt",
        uploaded: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc),
        expires: datetime = FAR_FUTURE,
    ) -> EntryMetadata:
        return EntryMetadata(
            entry_id=entry_id,
            filename=filename,
            uploaded=uploaded,
            expires=expires,
        )

    return _make


@pytest.fixture
def chunk_sizes(db):
    """
    Return a function listing an entry's chunk lengths in index order.
    """
    def _sizes(entry_id: str) -> List[int]:
        with db.connection() as conn:
            rows = conn.execute(
                "SELECT LENGTH(chunk) AS size FROM entries_data WHERE id = ? ORDER BY chunk_index",
                (entry_id,)
            ).fetchall()
        return [row["size"] for row in rows]

    return _sizes
