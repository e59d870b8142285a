"""Remote persistence of uploaded PDFs.

Uploads go to a Cloudflare R2 bucket through its S3-compatible API.
Persistence is best-effort: callers treat every failure here as non-fatal.
"""

from src.storage.config import StorageConfig, get_storage_config
from src.storage.object_store import (
    SIGNED_URL_TTL_SECONDS,
    ObjectStore,
    R2ObjectStore,
    StorageError,
    build_object_key,
    create_object_store,
)

__all__ = [
    "SIGNED_URL_TTL_SECONDS",
    "ObjectStore",
    "R2ObjectStore",
    "StorageConfig",
    "StorageError",
    "build_object_key",
    "create_object_store",
    "get_storage_config",
]
