"""Sequential reader that reassembles an entry's chunk rows into one byte stream."""

import io

from common.logging_config import get_logger
from store.repositories.chunk_repository import ChunkRepository

logger = get_logger(__name__)


class ChunkReader(io.RawIOBase):
    """
    Forward-only binary stream over the chunks of a single entry.

    Chunks are fetched one at a time, in index order, as the caller reads, so
    memory use stays bounded by one chunk whatever the entry size. A missing
    chunk row marks the end of the stream. The reader does not keep the entry
    alive: if the entry is deleted mid-read, the stream simply ends early.

    Construct a new reader to read from the beginning again.
    """

    def __init__(self, chunks: ChunkRepository, entry_id: str):
        super().__init__()
        self._chunks = chunks
        self.entry_id = entry_id
        self._next_chunk_index = 0
        self._buffer = memoryview(b"")
        self._offset = 0
        self._exhausted = False

    def readable(self) -> bool:
        return True

    def readinto(self, b) -> int:
        if self.closed:
            raise ValueError("I/O operation on closed reader")

        view = memoryview(b).cast("B")
        written = 0

        while written < len(view):
            if self._offset >= len(self._buffer) and not self._load_next_chunk():
                break

            n = min(len(view) - written, len(self._buffer) - self._offset)
            view[written:written + n] = self._buffer[self._offset:self._offset + n]
            self._offset += n
            written += n

        return written

    def close(self) -> None:
        self._buffer = memoryview(b"")
        self._offset = 0
        super().close()

    def _load_next_chunk(self) -> bool:
        if self._exhausted:
            return False

        data = self._chunks.get_chunk(self.entry_id, self._next_chunk_index)
        if data is None:
            logger.debug(
                f"Reached end of entry {self.entry_id} after {self._next_chunk_index} chunks"
            )
            self._exhausted = True
            self._buffer = memoryview(b"")
            self._offset = 0
            return False

        self._buffer = memoryview(data)
        self._offset = 0
        self._next_chunk_index += 1
        return True
