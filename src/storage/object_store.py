"""Object store client for uploaded PDFs.

Wraps boto3's S3 client pointed at R2. boto3 is blocking, so every call
runs in a worker thread to keep the event loop responsive.
"""

import asyncio
import logging
import time
from typing import Any, Protocol

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from src.storage.config import StorageConfig, get_storage_config

logger = logging.getLogger(__name__)

SIGNED_URL_TTL_SECONDS = 24 * 3600
KEY_PREFIX = "pdfs/"


class StorageError(Exception):
    """Raised when the object store rejects or fails an operation."""

    pass


class ObjectStore(Protocol):
    """Minimal object store used by document ingestion."""

    async def put(self, key: str, data: bytes, content_type: str) -> None: ...

    async def signed_get_url(self, key: str, ttl_seconds: int) -> str: ...


def build_object_key(filename: str, now_ms: int | None = None) -> str:
    """Return a collision-resistant key: ``pdfs/<unix millis>-<filename>``."""
    if now_ms is None:
        now_ms = time.time_ns() // 1_000_000
    return f"{KEY_PREFIX}{now_ms}-{filename}"


class R2ObjectStore:
    """ObjectStore backed by a Cloudflare R2 bucket."""

    def __init__(self, config: StorageConfig, s3_client: Any | None = None) -> None:
        self._bucket = config.bucket_name
        self._s3 = s3_client or boto3.client(
            "s3",
            region_name="auto",
            endpoint_url=config.endpoint_url,
            aws_access_key_id=config.access_key_id,
            aws_secret_access_key=config.secret_access_key,
        )

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        try:
            await asyncio.to_thread(
                self._s3.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=data,
                ContentType=content_type,
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to upload {key}: {e}") from e
        logger.info(f"File uploaded to R2: {key}")

    async def signed_get_url(self, key: str, ttl_seconds: int = SIGNED_URL_TTL_SECONDS) -> str:
        try:
            return await asyncio.to_thread(
                self._s3.generate_presigned_url,
                "get_object",
                Params={"Bucket": self._bucket, "Key": key},
                ExpiresIn=ttl_seconds,
            )
        except (BotoCoreError, ClientError) as e:
            raise StorageError(f"Failed to sign URL for {key}: {e}") from e


def create_object_store(config: StorageConfig | None = None) -> R2ObjectStore | None:
    """Build the R2 store, or None when the bucket is not configured."""
    config = config or get_storage_config()
    if not config.is_configured:
        logger.info("R2 storage not configured; uploads will be processed locally only")
        return None
    return R2ObjectStore(config)
