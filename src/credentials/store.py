"""Persisted provider selection and API keys.

Layout of the backing mapping:

    "ai-provider"        -> most recently saved provider tag
    "<provider>-api-key" -> API key for that provider

Keys for several providers can coexist; ``load`` restores only the pairing
of the most recently saved provider.
"""

import logging
from collections.abc import MutableMapping

from pydantic import ValidationError

from src.credentials.models import Credential, ProviderName

logger = logging.getLogger(__name__)

PROVIDER_KEY = "ai-provider"


def api_key_slot(provider: ProviderName) -> str:
    """Return the storage key holding a provider's API key."""
    return f"{provider.value}-api-key"


class CredentialStore:
    """Key-value lifecycle for the active credential.

    The backend is any string mapping: NiceGUI's ``app.storage.user`` for a
    browser profile, or a plain dict for API sessions and tests.
    """

    def __init__(self, backend: MutableMapping[str, str] | None = None) -> None:
        self._backend: MutableMapping[str, str] = backend if backend is not None else {}

    def save(self, provider: ProviderName | str, api_key: str) -> Credential:
        """Persist a provider and its key, making it the active pairing.

        Raises:
            ValidationError: If the provider or key is malformed.
        """
        credential = Credential(provider=provider, api_key=api_key)
        self._backend[PROVIDER_KEY] = credential.provider.value
        self._backend[api_key_slot(credential.provider)] = credential.api_key
        logger.info(f"Saved credential for provider: {credential.provider.value}")
        return credential

    def load(self) -> Credential | None:
        """Return the most recently saved credential, if any."""
        saved_provider = self._backend.get(PROVIDER_KEY)
        if not saved_provider:
            return None

        try:
            provider = ProviderName(saved_provider)
        except ValueError:
            logger.warning(f"Ignoring unknown saved provider: {saved_provider}")
            return None

        api_key = self._backend.get(api_key_slot(provider))
        if not api_key:
            return None

        try:
            return Credential(provider=provider, api_key=api_key)
        except ValidationError:
            logger.warning(f"Ignoring malformed saved key for provider: {provider.value}")
            return None
