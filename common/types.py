"""Shared data type definitions (EntryMetadata, Entry)."""

from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from store.chunk_reader import ChunkReader


@dataclass(frozen=True)
class EntryMetadata:
    """
    Metadata for a single uploaded file.
    """
    entry_id: str
    filename: str
    uploaded: datetime
    expires: datetime
    size: int = 0


@dataclass(frozen=True)
class Entry:
    """
    An entry ready to be read: metadata plus a lazy reader over its chunks.
    """
    metadata: EntryMetadata
    reader: "ChunkReader"
