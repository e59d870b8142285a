"""Anthropic messages adapter.

Document context is prefixed to the user prompt.
"""

import logging

from anthropic import (
    APIError,
    AsyncAnthropic,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)

from src.providers.base import CONTEXT_INSTRUCTION, DECLINE_INSTRUCTION, FALLBACK_RESPONSE
from src.providers.config import ProviderConfig, get_provider_config
from src.providers.errors import ProviderError, ProviderErrorKind

logger = logging.getLogger(__name__)


def build_prompt(user_text: str, document_context: str | None) -> str:
    """Return the user prompt, prefixed with the document when present."""
    if not document_context:
        return user_text
    return (
        f"{CONTEXT_INSTRUCTION} {document_context}\n\n"
        f"{DECLINE_INSTRUCTION}\n\n"
        f"Question: {user_text}"
    )


def classify_error(error: APIError) -> ProviderErrorKind:
    """Map an Anthropic SDK exception onto a ProviderErrorKind."""
    if isinstance(error, (AuthenticationError, PermissionDeniedError)):
        return ProviderErrorKind.AUTH_FAILURE
    if isinstance(error, RateLimitError):
        return ProviderErrorKind.QUOTA_EXCEEDED
    if isinstance(error, NotFoundError):
        return ProviderErrorKind.UNSUPPORTED
    return ProviderErrorKind.NETWORK_FAILURE


class AnthropicAdapter:
    """ProviderClient backed by ``AsyncAnthropic``."""

    provider = "anthropic"

    def __init__(self, api_key: str, config: ProviderConfig | None = None) -> None:
        self._config = config or get_provider_config()
        self.client = AsyncAnthropic(
            api_key=api_key,
            timeout=self._config.timeout,
            max_retries=0,
        )

    async def process_message(
        self,
        user_text: str,
        document_context: str | None = None,
    ) -> str:
        logger.debug(
            f"Anthropic request: model={self._config.anthropic_model}, "
            f"context_chars={len(document_context or '')}"
        )
        try:
            response = await self.client.messages.create(
                model=self._config.anthropic_model,
                max_tokens=self._config.max_tokens,
                temperature=self._config.temperature,
                messages=[{"role": "user", "content": build_prompt(user_text, document_context)}],
            )
        except APIError as e:
            kind = classify_error(e)
            logger.warning(f"Anthropic request failed ({kind.value}): {e}")
            raise ProviderError(kind, str(e), provider=self.provider) from e

        text = "".join(
            block.text for block in response.content if getattr(block, "type", None) == "text"
        )
        return text or FALLBACK_RESPONSE

    async def aclose(self) -> None:
        await self.client.close()
