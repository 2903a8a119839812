"""Configuration settings for the chunked entry store."""

import os
from common.constants import CHUNK_SIZE_BYTES, DEFAULT_DATABASE_PATH, DEFAULT_DB_TIMEOUT_SECONDS


DATABASE_PATH = os.environ.get("STORE_DATABASE_PATH", DEFAULT_DATABASE_PATH)

CHUNK_SIZE = int(os.environ.get("STORE_CHUNK_SIZE_BYTES", str(CHUNK_SIZE_BYTES)))

DB_TIMEOUT_SECONDS = float(os.environ.get("STORE_DB_TIMEOUT_SECONDS", str(DEFAULT_DB_TIMEOUT_SECONDS)))
