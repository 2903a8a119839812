"""Pydantic schemas for entry metadata and errors."""

from store.schemas.entries import EntryMetadataResponse, ListEntriesResponse
from store.schemas.common import ErrorResponse

__all__ = [
    "EntryMetadataResponse",
    "ListEntriesResponse",
    "ErrorResponse",
]
