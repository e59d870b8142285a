"""Credential model with provider-specific API key validation."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class ProviderName(str, Enum):
    """AI providers a user can pick."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    GOOGLE = "google"

    @property
    def label(self) -> str:
        """Upper-case name used in user-facing messages."""
        return self.value.upper()


# Key prefixes issued by each vendor
API_KEY_PREFIXES: dict[ProviderName, tuple[str, ...]] = {
    ProviderName.OPENAI: ("sk-",),
    ProviderName.ANTHROPIC: ("sk-ant-", "ant-"),
    ProviderName.GOOGLE: ("ai-", "AIza"),
}


class Credential(BaseModel):
    """A provider selection paired with its API key.

    Attributes:
        provider: The chosen AI provider.
        api_key: Key sent only to that provider's endpoint.
    """

    model_config = ConfigDict(frozen=True)

    provider: ProviderName
    api_key: str = Field(repr=False)

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip whitespace and reject empty keys."""
        if not v or not v.strip():
            raise ValueError("API key is required")
        return v.strip()

    @model_validator(mode="after")
    def check_key_prefix(self) -> "Credential":
        """Reject keys that do not look like the provider's keys."""
        if not self.api_key.startswith(API_KEY_PREFIXES[self.provider]):
            raise ValueError("Invalid API key format")
        return self
