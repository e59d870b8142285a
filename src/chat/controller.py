"""Conversation controller: the single writer of session chat state.

Routes user input to the active ProviderClient, grounded in the active
document, and keeps the transcript append-only. Errors are surfaced through
``error`` rather than raised, so the UI and API can render them.
"""

import logging
from collections.abc import Callable

from pydantic import ValidationError

from src.chat.models import Message, Role, Transcript
from src.credentials.models import Credential, ProviderName
from src.credentials.store import CredentialStore
from src.ingestion.errors import IngestionError
from src.ingestion.ingestor import DocumentIngestor
from src.ingestion.models import IngestedDocument, UploadedFile
from src.models.schemas import ChatRequest, first_error_message
from src.providers.base import ProviderClient
from src.providers.errors import AuthInitError, ProviderError, UnsupportedProviderError
from src.providers.factory import create_client

logger = logging.getLogger(__name__)

NO_CREDENTIALS_ERROR = "Please set up your AI provider API key first"

ClientFactory = Callable[[ProviderName, str], ProviderClient]


def processed_notice(filename: str) -> str:
    return f'I\'ve processed "{filename}". You can now ask questions about its content.'


class ConversationController:
    """Holds the transcript, provider client and document for one session.

    Only one ``submit`` or ``upload`` runs at a time; calls made while one is
    in flight are ignored.

    Attributes:
        transcript: Append-only conversation history.
        client: Active provider client, None until credentials are set.
        provider: Provider the active client belongs to.
        document: Active ingested document, if any.
        is_busy: Whether a submit or upload is in flight.
        error: Latest user-facing error message.
        failure: Exception behind ``error``, when there is one.
        credentials_required: Whether the credential dialog should be shown.
        on_change: Called after every transcript append.
    """

    def __init__(
        self,
        credential_store: CredentialStore | None = None,
        ingestor: DocumentIngestor | None = None,
        client_factory: ClientFactory = create_client,
    ) -> None:
        self._credential_store = credential_store or CredentialStore()
        self._ingestor = ingestor or DocumentIngestor()
        self._client_factory = client_factory

        self.transcript = Transcript()
        self.client: ProviderClient | None = None
        self.provider: ProviderName | None = None
        self.document: IngestedDocument | None = None
        self.is_busy = False
        self.error: str | None = None
        self.failure: Exception | None = None
        self.credentials_required = True
        self.on_change: Callable[[], None] | None = None
        self._calling: ProviderClient | None = None
        self._stale_clients: list[ProviderClient] = []

    def clear_error(self) -> None:
        self.error = None
        self.failure = None

    def _append(self, message: Message) -> None:
        self.transcript.append(message)
        if self.on_change is not None:
            self.on_change()

    def _fail(self, message: str, failure: Exception | None = None) -> None:
        self.error = message
        self.failure = failure

    async def _install_client(self, provider: ProviderName, client: ProviderClient) -> None:
        previous = self.client
        self.client = client
        self.provider = provider
        self.credentials_required = False
        logger.info(f"Active provider: {provider.value}")
        if previous is None or previous is client:
            return
        if previous is self._calling:
            # Closed once its in-flight request finishes
            self._stale_clients.append(previous)
        else:
            await previous.aclose()

    async def _close_stale_clients(self) -> None:
        while self._stale_clients:
            await self._stale_clients.pop().aclose()

    async def configure(self, provider: ProviderName | str, api_key: str) -> bool:
        """Validate a credential, build its client, and persist it.

        Returns:
            True when the new client is installed.
        """
        try:
            credential = Credential(provider=provider, api_key=api_key)
        except ValidationError as e:
            self._fail(first_error_message(e), e)
            return False

        try:
            client = self._client_factory(credential.provider, credential.api_key)
        except (AuthInitError, UnsupportedProviderError) as e:
            logger.warning(f"Client initialization failed for {credential.provider.value}: {e}")
            self._fail(f"Failed to initialize {credential.provider.label} API", e)
            self.credentials_required = True
            return False

        self._credential_store.save(credential.provider, credential.api_key)
        await self._install_client(credential.provider, client)
        self.clear_error()
        return True

    async def restore(self) -> bool:
        """Install a client for the saved credential, if one exists.

        Returns:
            True when a saved credential was restored.
        """
        credential = self._credential_store.load()
        if credential is None:
            return False

        try:
            client = self._client_factory(credential.provider, credential.api_key)
        except (AuthInitError, UnsupportedProviderError) as e:
            logger.warning(f"Saved credential for {credential.provider.value} unusable: {e}")
            self._fail(f"Failed to initialize {credential.provider.label} API with saved key", e)
            return False

        await self._install_client(credential.provider, client)
        return True

    async def submit(self, user_text: str) -> Message | None:
        """Send a user message and append the assistant's reply.

        The user message is appended before the provider call. When the call
        fails, nothing else is appended and ``error`` is set.

        Returns:
            The assistant message, or None when the submit was refused or failed.
        """
        if self.is_busy:
            logger.debug("Ignoring submit while another request is in flight")
            return None

        try:
            request = ChatRequest(message=user_text)
        except ValidationError as e:
            self._fail(first_error_message(e), e)
            return None

        if self.client is None or self.provider is None:
            self._fail(NO_CREDENTIALS_ERROR)
            self.credentials_required = True
            return None

        provider = self.provider
        client = self._calling = self.client
        self.is_busy = True
        self.clear_error()
        try:
            self._append(Message(role=Role.USER, content=request.message))
            context = self.document.extracted_text if self.document else None
            try:
                reply = await client.process_message(request.message, context)
            except ProviderError as e:
                self._fail(f"Failed to get response from {provider.label}", e)
                return None

            message = Message(role=Role.ASSISTANT, content=reply)
            self._append(message)
            return message
        finally:
            self._calling = None
            self.is_busy = False
            await self._close_stale_clients()

    async def upload(self, upload: UploadedFile) -> IngestedDocument | None:
        """Ingest a PDF and make it the active document.

        A failed ingestion leaves the previous document in place.

        Returns:
            The new document, or None when refused or failed.
        """
        if self.is_busy:
            logger.debug("Ignoring upload while another request is in flight")
            return None

        self.is_busy = True
        self.clear_error()
        try:
            document = await self._ingestor.ingest(upload)
        except IngestionError as e:
            self._fail(str(e), e)
            return None
        finally:
            self.is_busy = False

        self.document = document
        self._append(Message(role=Role.ASSISTANT, content=processed_notice(document.name)))
        return document

    async def close(self) -> None:
        """Release the active client. Used when the session is discarded."""
        await self._close_stale_clients()
        if self.client is not None:
            await self.client.aclose()
            self.client = None
            self.provider = None
            self.credentials_required = True
