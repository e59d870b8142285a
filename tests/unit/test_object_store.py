"""Unit tests for object keys and the R2 object store."""

from unittest.mock import MagicMock

import pytest
from botocore.exceptions import ClientError

from src.storage.config import StorageConfig
from src.storage.object_store import (
    SIGNED_URL_TTL_SECONDS,
    R2ObjectStore,
    StorageError,
    build_object_key,
    create_object_store,
)


@pytest.fixture
def config() -> StorageConfig:
    return StorageConfig(
        account_id="acct",
        access_key_id="key-id",
        secret_access_key="secret",
        bucket_name="uploads",
    )


def client_error(operation: str) -> ClientError:
    return ClientError({"Error": {"Code": "AccessDenied", "Message": "denied"}}, operation)


class TestBuildObjectKey:
    """Tests for upload key format."""

    def test_uses_prefix_millis_and_name(self) -> None:
        assert build_object_key("report.pdf", now_ms=1700000000123) == (
            "pdfs/1700000000123-report.pdf"
        )

    def test_defaults_to_current_time(self) -> None:
        prefix, _, name = build_object_key("a.pdf").partition("-")

        assert name == "a.pdf"
        assert prefix.startswith("pdfs/")
        assert prefix.removeprefix("pdfs/").isdigit()


class TestStorageConfig:
    """Tests for environment-driven storage config."""

    def test_is_configured_requires_every_setting(self, config: StorageConfig) -> None:
        assert config.is_configured
        assert not config.model_copy(update={"bucket_name": ""}).is_configured

    def test_endpoint_points_at_account(self, config: StorageConfig) -> None:
        assert config.endpoint_url == "https://acct.r2.cloudflarestorage.com"

    def test_create_object_store_disabled_without_config(self) -> None:
        assert create_object_store(StorageConfig(account_id="", bucket_name="")) is None

    def test_create_object_store_with_config(self, config: StorageConfig) -> None:
        assert isinstance(create_object_store(config), R2ObjectStore)


class TestR2ObjectStore:
    """Tests for the boto3-backed store."""

    async def test_put_uploads_with_content_type(self, config: StorageConfig) -> None:
        s3 = MagicMock()
        store = R2ObjectStore(config, s3_client=s3)

        await store.put("pdfs/1-a.pdf", b"%PDF-1.4", "application/pdf")

        s3.put_object.assert_called_once_with(
            Bucket="uploads",
            Key="pdfs/1-a.pdf",
            Body=b"%PDF-1.4",
            ContentType="application/pdf",
        )

    async def test_signed_url_uses_ttl(self, config: StorageConfig) -> None:
        s3 = MagicMock()
        s3.generate_presigned_url.return_value = "https://signed.example/a.pdf"
        store = R2ObjectStore(config, s3_client=s3)

        url = await store.signed_get_url("pdfs/1-a.pdf", SIGNED_URL_TTL_SECONDS)

        assert url == "https://signed.example/a.pdf"
        s3.generate_presigned_url.assert_called_once_with(
            "get_object",
            Params={"Bucket": "uploads", "Key": "pdfs/1-a.pdf"},
            ExpiresIn=86400,
        )

    async def test_put_failure_raises_storage_error(self, config: StorageConfig) -> None:
        s3 = MagicMock()
        s3.put_object.side_effect = client_error("PutObject")
        store = R2ObjectStore(config, s3_client=s3)

        with pytest.raises(StorageError, match="pdfs/1-a.pdf"):
            await store.put("pdfs/1-a.pdf", b"%PDF", "application/pdf")

    async def test_signing_failure_raises_storage_error(self, config: StorageConfig) -> None:
        s3 = MagicMock()
        s3.generate_presigned_url.side_effect = client_error("GetObject")
        store = R2ObjectStore(config, s3_client=s3)

        with pytest.raises(StorageError):
            await store.signed_get_url("pdfs/1-a.pdf", SIGNED_URL_TTL_SECONDS)
