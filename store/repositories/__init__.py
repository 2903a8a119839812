"""Repository layer for data access."""

from store.repositories.entry_repository import EntryRepository
from store.repositories.chunk_repository import ChunkRepository

__all__ = [
    "EntryRepository",
    "ChunkRepository",
]
