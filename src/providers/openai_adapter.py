"""OpenAI chat completions adapter.

Document context travels as the system message.
"""

import logging

from openai import (
    APIError,
    AsyncOpenAI,
    AuthenticationError,
    NotFoundError,
    PermissionDeniedError,
    RateLimitError,
)

from src.providers.base import (
    CONTEXT_INSTRUCTION,
    DECLINE_INSTRUCTION,
    FALLBACK_RESPONSE,
    SYSTEM_PROMPT,
)
from src.providers.config import ProviderConfig, get_provider_config
from src.providers.errors import ProviderError, ProviderErrorKind

logger = logging.getLogger(__name__)


def build_system_prompt(document_context: str | None) -> str:
    """Return the system message, grounding it in the document when present."""
    if not document_context:
        return SYSTEM_PROMPT
    return f"{SYSTEM_PROMPT} {CONTEXT_INSTRUCTION} {document_context}. {DECLINE_INSTRUCTION}"


def classify_error(error: APIError) -> ProviderErrorKind:
    """Map an OpenAI SDK exception onto a ProviderErrorKind."""
    if isinstance(error, (AuthenticationError, PermissionDeniedError)):
        return ProviderErrorKind.AUTH_FAILURE
    if isinstance(error, RateLimitError):
        return ProviderErrorKind.QUOTA_EXCEEDED
    if isinstance(error, NotFoundError):
        return ProviderErrorKind.UNSUPPORTED
    return ProviderErrorKind.NETWORK_FAILURE


class OpenAIAdapter:
    """ProviderClient backed by ``AsyncOpenAI``."""

    provider = "openai"

    def __init__(self, api_key: str, config: ProviderConfig | None = None) -> None:
        self._config = config or get_provider_config()
        # One request per message; retries are left to the user
        self.client = AsyncOpenAI(
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
            f"OpenAI request: model={self._config.openai_model}, "
            f"context_chars={len(document_context or '')}"
        )
        try:
            response = await self.client.chat.completions.create(
                model=self._config.openai_model,
                messages=[
                    {"role": "system", "content": build_system_prompt(document_context)},
                    {"role": "user", "content": user_text},
                ],
                max_tokens=self._config.max_tokens,
                temperature=self._config.temperature,
            )
        except APIError as e:
            kind = classify_error(e)
            logger.warning(f"OpenAI request failed ({kind.value}): {e}")
            raise ProviderError(kind, str(e), provider=self.provider) from e

        if not response.choices:
            return FALLBACK_RESPONSE
        return response.choices[0].message.content or FALLBACK_RESPONSE

    async def aclose(self) -> None:
        await self.client.close()
