"""Pydantic schemas for serializing entry metadata to consuming layers."""

from typing import List
from pydantic import BaseModel

from common.types import EntryMetadata
from store.timecodec import format_time


class EntryMetadataResponse(BaseModel):
    """Response model for entry metadata, timestamps in the stored format."""
    id: str
    filename: str
    uploaded: str
    expires: str
    size: int

    @classmethod
    def from_metadata(cls, metadata: EntryMetadata) -> "EntryMetadataResponse":
        return cls(
            id=metadata.entry_id,
            filename=metadata.filename,
            uploaded=format_time(metadata.uploaded),
            expires=format_time(metadata.expires),
            size=metadata.size,
        )


class ListEntriesResponse(BaseModel):
    """Response model for entry listing."""
    entries: List[EntryMetadataResponse]

    @classmethod
    def from_metadata(cls, entries: List[EntryMetadata]) -> "ListEntriesResponse":
        return cls(entries=[EntryMetadataResponse.from_metadata(m) for m in entries])
