"""AI provider abstraction.

One async interface over heterogeneous vendor chat APIs.

Responsibilities:
    - ProviderClient protocol shared by every vendor adapter
    - OpenAI and Anthropic adapters with document context injection
    - Placeholder adapter for providers that are not wired up yet
    - Normalizing vendor SDK exceptions into ProviderError kinds
    - create_client: the single provider tag -> adapter dispatch point
"""

from src.providers.base import FALLBACK_RESPONSE, ProviderClient
from src.providers.config import ProviderConfig, get_provider_config
from src.providers.errors import (
    AuthInitError,
    ProviderError,
    ProviderErrorKind,
    UnsupportedProviderError,
)
from src.providers.factory import create_client

__all__ = [
    "FALLBACK_RESPONSE",
    "AuthInitError",
    "ProviderClient",
    "ProviderConfig",
    "ProviderError",
    "ProviderErrorKind",
    "UnsupportedProviderError",
    "create_client",
    "get_provider_config",
]
