"""Object storage configuration loaded from the environment."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class StorageConfig(BaseModel):
    """Cloudflare R2 bucket settings.

    Attributes:
        account_id: Cloudflare account owning the bucket.
        access_key_id: R2 access key.
        secret_access_key: R2 secret key.
        bucket_name: Bucket receiving uploaded PDFs.
    """

    account_id: str = Field(default_factory=lambda: os.getenv("R2_ACCOUNT_ID", ""))
    access_key_id: str = Field(default_factory=lambda: os.getenv("R2_ACCESS_KEY_ID", ""))
    secret_access_key: str = Field(
        default_factory=lambda: os.getenv("R2_SECRET_ACCESS_KEY", ""),
        repr=False,
    )
    bucket_name: str = Field(default_factory=lambda: os.getenv("R2_BUCKET_NAME", ""))

    @property
    def is_configured(self) -> bool:
        """Whether every setting needed to reach the bucket is present."""
        return all(
            (self.account_id, self.access_key_id, self.secret_access_key, self.bucket_name)
        )

    @property
    def endpoint_url(self) -> str:
        return f"https://{self.account_id}.r2.cloudflarestorage.com"


def get_storage_config() -> StorageConfig:
    """Create storage configuration from environment.

    Returns:
        Configured StorageConfig instance.
    """
    return StorageConfig()
