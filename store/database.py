"""Database schema and connection management for SQLite."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Generator, Union

from common.logging_config import get_logger
from store.config import DB_TIMEOUT_SECONDS
from store.exceptions import SchemaInitializationError

logger = get_logger(__name__)

SCHEMA_STATEMENTS = [
    """
    CREATE TABLE IF NOT EXISTS entries (
        id TEXT PRIMARY KEY,
        filename TEXT,
        upload_time TEXT,
        expiration_time TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS entries_data (
        id TEXT,
        chunk_index INTEGER,
        chunk BLOB,
        FOREIGN KEY(id) REFERENCES entries(id)
    )
    """,
    """
    CREATE UNIQUE INDEX IF NOT EXISTS idx_entries_data_id_chunk ON entries_data(id, chunk_index)
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_entries_expiration ON entries(expiration_time)
    """,
]


class Database:
    """
    Handle on a SQLite database file.

    Every operation opens its own connection, so one handle can be shared by
    independent callers. The path must name a file: ':memory:' would give each
    connection its own empty database.
    """

    def __init__(self, path: Union[str, Path], timeout: float = DB_TIMEOUT_SECONDS):
        self.path = Path(path)
        self.timeout = timeout

    @contextmanager
    def connection(self) -> Generator[sqlite3.Connection, None, None]:
        """
        Context manager for database connections.
        """
        conn = sqlite3.connect(self.path, timeout=self.timeout)
        conn.row_factory = sqlite3.Row
        try:
            yield conn
        finally:
            conn.close()

    def init_schema(self) -> None:
        """
        Create the entries and entries_data tables if they don't exist.

        Raises:
            SchemaInitializationError: If the schema cannot be created
        """
        logger.info(f"Reading DB from {self.path}")

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.connection() as conn:
                cursor = conn.cursor()
                for statement in SCHEMA_STATEMENTS:
                    cursor.execute(statement)
                conn.commit()
        except (sqlite3.Error, OSError) as e:
            logger.critical(f"Failed to initialize schema at {self.path}: {e}", exc_info=True)
            raise SchemaInitializationError(f"cannot initialize schema at {self.path}: {e}") from e
