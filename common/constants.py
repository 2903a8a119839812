"""Project-wide constants (chunk sizing, persisted time format)."""

CHUNK_SIZE_BYTES: int = 32 * 1024 * 1024  # 32 MiB default chunk size

TIME_FORMAT: str = "%Y-%m-%dT%H:%M:%SZ"

DEFAULT_DATABASE_PATH: str = "data/store.db"

DEFAULT_DB_TIMEOUT_SECONDS: float = 30.0
