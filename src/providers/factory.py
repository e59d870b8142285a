"""Construction of provider clients.

``create_client`` is the only place that maps a provider tag to an adapter.
Adding a provider means one adapter class and one ``case`` here.
"""

import logging

from src.credentials.models import ProviderName
from src.providers.anthropic_adapter import AnthropicAdapter
from src.providers.base import ProviderClient
from src.providers.config import ProviderConfig
from src.providers.errors import AuthInitError, UnsupportedProviderError
from src.providers.openai_adapter import OpenAIAdapter
from src.providers.unavailable import UnavailableAdapter

logger = logging.getLogger(__name__)


def _parse_provider(provider: ProviderName | str) -> ProviderName:
    try:
        return ProviderName(provider)
    except ValueError as e:
        raise UnsupportedProviderError(f"Unsupported AI provider: {provider}") from e


def create_client(
    provider: ProviderName | str,
    api_key: str,
    config: ProviderConfig | None = None,
) -> ProviderClient:
    """Create a ProviderClient for a provider tag and API key.

    Performs no network I/O; a bad key surfaces on the first message.

    Args:
        provider: Provider tag or ProviderName.
        api_key: Key for that provider.
        config: Optional request settings. Loads from environment if not provided.

    Returns:
        The adapter for the provider.

    Raises:
        UnsupportedProviderError: If the tag is not a known provider.
        AuthInitError: If the vendor SDK rejects the key at construction.
    """
    name = _parse_provider(provider)

    try:
        match name:
            case ProviderName.OPENAI:
                client: ProviderClient = OpenAIAdapter(api_key, config)
            case ProviderName.ANTHROPIC:
                client = AnthropicAdapter(api_key, config)
            case ProviderName.GOOGLE:
                client = UnavailableAdapter(name.value, "Google AI")
    except Exception as e:
        raise AuthInitError(f"Failed to initialize {name.label} API: {e}") from e

    logger.info(f"Created {name.value} client")
    return client
