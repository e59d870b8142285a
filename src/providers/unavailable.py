"""Placeholder adapter for providers that are not integrated yet."""


class UnavailableAdapter:
    """ProviderClient that answers every message with a fixed notice."""

    def __init__(self, provider: str, display_name: str) -> None:
        self.provider = provider
        self.display_name = display_name

    async def process_message(
        self,
        user_text: str,
        document_context: str | None = None,
    ) -> str:
        return f"{self.display_name} integration is not yet available."

    async def aclose(self) -> None:
        pass
