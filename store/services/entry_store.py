"""Entry store: chunked writes, transactional deletes and lazy reads of entries."""

from datetime import datetime, timezone
from typing import BinaryIO, Callable, List

from common.logging_config import get_logger
from common.types import Entry, EntryMetadata
from store.chunk_reader import ChunkReader
from store.config import CHUNK_SIZE
from store.database import Database
from store.exceptions import EntryNotFoundError
from store.repositories.chunk_repository import ChunkRepository
from store.repositories.entry_repository import EntryRepository

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EntryStore:
    """
    Stores uploaded files as one metadata row plus ordered, bounded-size chunk rows.

    Writes and deletes each run in a single transaction that is rolled back
    explicitly on any failure, so a partially written entry is never visible.
    Reads return a ChunkReader that fetches chunks lazily.
    """

    def __init__(
        self,
        db: Database,
        chunk_size: int = CHUNK_SIZE,
        clock: Callable[[], datetime] = utc_now,
    ):
        if chunk_size <= 0:
            raise ValueError(f"chunk_size must be positive, got {chunk_size}")

        self.db = db
        self.chunk_size = chunk_size
        self.clock = clock
        self.entry_repo = EntryRepository(db)
        self.chunk_repo = ChunkRepository(db)

    def get_entries_metadata(self) -> List[EntryMetadata]:
        """
        List metadata for all entries, including expired ones.
        """
        return self.entry_repo.list_all()

    def get_entry(self, entry_id: str) -> Entry:
        """
        Look up an unexpired entry and open a reader over its content.

        Raises:
            EntryNotFoundError: If no entry has this id or it has expired
        """
        metadata = self.entry_repo.get_active(entry_id, self.clock())
        if metadata is None:
            raise EntryNotFoundError(entry_id)

        return Entry(
            metadata=metadata,
            reader=ChunkReader(self.chunk_repo, entry_id),
        )

    def insert_entry(self, stream: BinaryIO, metadata: EntryMetadata) -> None:
        """
        Save metadata and the full content of stream as a new entry.

        The stream is read chunk_size bytes at a time until it returns no
        data; every non-empty read becomes the next chunk row. Nothing is
        committed unless the whole stream was stored.

        Raises:
            EntryAlreadyExistsError: If metadata.entry_id is already in use
        """
        entry_id = metadata.entry_id
        logger.info(f"Saving new entry {entry_id}")

        with self.db.connection() as conn:
            try:
                self.entry_repo.create(metadata, conn)

                chunk_index = 0
                offset = 0
                while True:
                    data = stream.read(self.chunk_size)
                    if not data:
                        break

                    logger.info(
                        f"Writing entry {entry_id} chunk {chunk_index} - "
                        f"{len(data):10d} bytes @ offset {offset:10d}"
                    )
                    self.chunk_repo.insert_chunk(entry_id, chunk_index, data, conn)
                    offset += len(data)
                    chunk_index += 1

                conn.commit()
            except BaseException as e:
                conn.rollback()
                logger.error(f"Failed to save entry {entry_id}, rolled back: {e}", exc_info=True)
                raise

        logger.info(f"Saved entry {entry_id} with {chunk_index} chunks ({offset} bytes)")

    def delete_entry(self, entry_id: str) -> None:
        """
        Delete an entry and all its chunks, expired or not.

        Deleting an id that does not exist is not an error.
        """
        logger.info(f"Deleting entry {entry_id}")

        with self.db.connection() as conn:
            try:
                deleted_chunks = self.chunk_repo.delete_chunks(entry_id, conn)
                deleted_entries = self.entry_repo.delete(entry_id, conn)
                conn.commit()
            except BaseException as e:
                conn.rollback()
                logger.error(f"Failed to delete entry {entry_id}, rolled back: {e}", exc_info=True)
                raise

        if deleted_entries:
            logger.info(f"Deleted entry {entry_id} and {deleted_chunks} chunks")
        else:
            logger.debug(f"No entry {entry_id} to delete")

    def purge_expired(self) -> int:
        """
        Delete every expired entry together with its chunks.

        Returns:
            Number of entries removed
        """
        now = self.clock()

        with self.db.connection() as conn:
            try:
                # Take the write lock before selecting so no entry can be
                # replaced between the SELECT and the DELETEs.
                conn.execute("BEGIN IMMEDIATE")
                expired_ids = self.entry_repo.list_expired_ids(now, conn)
                for entry_id in expired_ids:
                    self.chunk_repo.delete_chunks(entry_id, conn)
                    self.entry_repo.delete(entry_id, conn)
                conn.commit()
            except BaseException as e:
                conn.rollback()
                logger.error(f"Failed to purge expired entries, rolled back: {e}", exc_info=True)
                raise

        if expired_ids:
            logger.info(f"Purged {len(expired_ids)} expired entries")

        return len(expired_ids)
