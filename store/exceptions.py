"""Custom exception classes for the entry store."""


class StoreException(Exception):
    """
    Base exception class for all store-related errors.
    """
    pass


class SchemaInitializationError(StoreException):
    """
    Raised when the database schema cannot be created. Startup cannot continue.
    """
    pass


class EntryNotFoundError(StoreException):
    """
    Raised when a requested entry does not exist or has expired.
    """

    def __init__(self, entry_id: str):
        super().__init__(f"entry not found: {entry_id}")
        self.entry_id = entry_id


class EntryAlreadyExistsError(StoreException):
    """
    Raised when inserting an entry whose id is already taken.
    """

    def __init__(self, entry_id: str):
        super().__init__(f"entry already exists: {entry_id}")
        self.entry_id = entry_id


class MalformedTimestampError(StoreException, ValueError):
    """
    Raised when a stored timestamp does not match the persisted time format.
    """
    pass
