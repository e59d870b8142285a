"""Provider configuration with environment variable loading.

Model identifiers and request limits shared by the vendor adapters.
API keys are not part of this config; they come from the user at runtime.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

# Load environment variables from .env file
load_dotenv()


class ProviderConfig(BaseModel):
    """Request settings for vendor chat calls.

    Attributes:
        openai_model: Model identifier for the OpenAI adapter.
        anthropic_model: Model identifier for the Anthropic adapter.
        max_tokens: Maximum tokens in a generated response.
        temperature: Sampling temperature (0.0 = deterministic, 2.0 = creative).
        timeout: Per-request timeout in seconds.
    """

    openai_model: str = Field(
        default_factory=lambda: os.getenv("OPENAI_MODEL", "gpt-4o-mini"),
        description="OpenAI chat model",
    )
    anthropic_model: str = Field(
        default_factory=lambda: os.getenv("ANTHROPIC_MODEL", "claude-sonnet-4-5"),
        description="Anthropic messages model",
    )
    max_tokens: int = Field(
        default_factory=lambda: int(os.getenv("LLM_MAX_TOKENS", "1024")),
        ge=1,
        le=128000,
        description="Maximum tokens in generated response",
    )
    temperature: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TEMPERATURE", "0.7")),
        ge=0.0,
        le=2.0,
        description="Sampling temperature for response generation",
    )
    timeout: float = Field(
        default_factory=lambda: float(os.getenv("LLM_TIMEOUT", "60")),
        gt=0.0,
        description="Request timeout in seconds",
    )


def get_provider_config() -> ProviderConfig:
    """Create provider configuration from environment.

    Returns:
        Configured ProviderConfig instance.
    """
    return ProviderConfig()
