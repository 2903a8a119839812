"""Bootstrap an EntryStore: logging, database handle and schema."""

from pathlib import Path
from typing import Optional, Union

from common.logging_config import setup_logging
from store.config import CHUNK_SIZE, DATABASE_PATH
from store.database import Database
from store.services.entry_store import EntryStore


def open_store(
    path: Optional[Union[str, Path]] = None,
    chunk_size: int = CHUNK_SIZE,
) -> EntryStore:
    """
    Open the database at path, creating its schema if needed.

    Args:
        path: SQLite database file (default: STORE_DATABASE_PATH)
        chunk_size: Maximum bytes per chunk row

    Returns:
        Ready-to-use EntryStore

    Raises:
        SchemaInitializationError: If the schema cannot be created. This is
            a startup failure; the store is unusable without its schema.
    """
    logger = setup_logging('store')

    db = Database(path if path is not None else DATABASE_PATH)
    db.init_schema()

    logger.info(f"Entry store ready [path={db.path}, chunk_size={chunk_size}]")
    return EntryStore(db, chunk_size=chunk_size)
