"""Registry of per-session conversation controllers."""

import logging
import time
import uuid
from collections import OrderedDict
from collections.abc import Callable, MutableMapping

from src.chat.config import SessionConfig, get_session_config
from src.chat.controller import ClientFactory, ConversationController
from src.credentials.store import CredentialStore
from src.ingestion.ingestor import DocumentIngestor
from src.parsing.pdf_parser import PDFContent, parse_pdf
from src.providers.factory import create_client
from src.storage.object_store import ObjectStore, create_object_store

logger = logging.getLogger(__name__)


class SessionRegistry:
    """Creates controllers and tracks the ones addressed by session id.

    Every controller gets its own CredentialStore and DocumentIngestor; the
    object store and client factory are shared. Registered sessions expire
    after ``config.idle_ttl`` seconds without use, and at most
    ``config.max_sessions`` are kept. Busy sessions are never evicted.
    """

    def __init__(
        self,
        object_store: ObjectStore | None = None,
        client_factory: ClientFactory = create_client,
        extractor: Callable[[bytes], PDFContent] = parse_pdf,
        config: SessionConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._object_store = object_store
        self._client_factory = client_factory
        self._extractor = extractor
        self._config = config or get_session_config()
        self._clock = clock
        # Least recently used first
        self._sessions: OrderedDict[str, tuple[ConversationController, float]] = OrderedDict()

    def __len__(self) -> int:
        return len(self._sessions)

    def create_controller(
        self,
        credential_backend: MutableMapping[str, str] | None = None,
    ) -> ConversationController:
        """Build an unregistered controller, e.g. for one browser page."""
        return ConversationController(
            credential_store=CredentialStore(credential_backend),
            ingestor=DocumentIngestor(self._object_store, self._extractor),
            client_factory=self._client_factory,
        )

    async def get(self, session_id: str | None) -> ConversationController | None:
        """Return a registered controller and mark it as used, or None."""
        await self._evict_idle()
        if session_id is None or session_id not in self._sessions:
            return None
        controller, _ = self._sessions.pop(session_id)
        self._sessions[session_id] = (controller, self._clock())
        return controller

    async def add(self, controller: ConversationController) -> str:
        """Register a controller under a fresh uuid4 session id.

        Returns:
            The new session id.
        """
        await self._evict_idle()
        while len(self._sessions) >= self._config.max_sessions:
            if not await self._evict_oldest():
                logger.warning("Session limit reached with every session busy")
                break

        session_id = str(uuid.uuid4())
        self._sessions[session_id] = (controller, self._clock())
        logger.info(f"Created session {session_id}")
        return session_id

    async def _evict_idle(self) -> None:
        cutoff = self._clock() - self._config.idle_ttl
        expired = [
            session_id
            for session_id, (controller, last_used) in self._sessions.items()
            if last_used <= cutoff and not controller.is_busy
        ]
        for session_id in expired:
            await self._discard(session_id, "idle")

    async def _evict_oldest(self) -> bool:
        for session_id, (controller, _) in self._sessions.items():
            if not controller.is_busy:
                await self._discard(session_id, "limit")
                return True
        return False

    async def _discard(self, session_id: str, reason: str) -> None:
        controller, _ = self._sessions.pop(session_id)
        logger.info(f"Evicted session {session_id} ({reason})")
        await controller.close()


# Module-level singleton instance
_session_registry: SessionRegistry | None = None


def get_session_registry() -> SessionRegistry:
    """Get or create the global session registry.

    The R2 object store is attached when its environment is configured.

    Returns:
        The SessionRegistry instance.
    """
    global _session_registry
    if _session_registry is None:
        _session_registry = SessionRegistry(object_store=create_object_store())
    return _session_registry
