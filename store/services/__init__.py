"""Service layer for entry storage."""

from store.services.entry_store import EntryStore

__all__ = [
    "EntryStore",
]
