"""Common schemas used across consumers of the store."""

from pydantic import BaseModel

from store.exceptions import (
    EntryAlreadyExistsError,
    EntryNotFoundError,
    MalformedTimestampError,
    StoreException,
)

ERROR_CODES = {
    EntryNotFoundError: "ENTRY_NOT_FOUND",
    EntryAlreadyExistsError: "ENTRY_ALREADY_EXISTS",
    MalformedTimestampError: "MALFORMED_TIMESTAMP",
}


class ErrorResponse(BaseModel):
    """Response model for errors."""
    detail: str
    code: str

    @classmethod
    def from_exception(cls, exc: StoreException) -> "ErrorResponse":
        code = next(
            (code for exc_type, code in ERROR_CODES.items() if isinstance(exc, exc_type)),
            "STORE_ERROR",
        )
        return cls(detail=str(exc), code=code)
