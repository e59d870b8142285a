"""Interface shared by every provider adapter."""

from typing import Protocol, runtime_checkable

FALLBACK_RESPONSE = "Sorry, I couldn't generate a response."

SYSTEM_PROMPT = "You are a helpful assistant."
CONTEXT_INSTRUCTION = "Use the following PDF content to answer questions:"
DECLINE_INSTRUCTION = "If the question cannot be answered using the PDF content, say so."


@runtime_checkable
class ProviderClient(Protocol):
    """A chat session bound to one vendor and one API key."""

    async def process_message(
        self,
        user_text: str,
        document_context: str | None = None,
    ) -> str:
        """Send one user message and return the assistant's reply.

        Args:
            user_text: The user's message, already validated by the caller.
            document_context: Extracted PDF text to ground the answer in.

        Returns:
            The reply text, or FALLBACK_RESPONSE when the vendor returns none.

        Raises:
            ProviderError: If the vendor call fails.
        """
        ...

    async def aclose(self) -> None:
        """Release the vendor SDK session. The client is unusable afterwards."""
        ...
