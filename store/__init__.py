"""Chunked storage of large uploaded files inside SQLite."""

from store.bootstrap import open_store
from store.database import Database
from store.services.entry_store import EntryStore

__all__ = [
    "open_store",
    "Database",
    "EntryStore",
]
