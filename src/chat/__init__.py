"""Conversation state for a browser or API session.

Responsibilities:
    - Append-only transcript of user and assistant messages
    - Owning the active provider client and ingested document
    - Busy-gating so only one request runs at a time
    - One controller per session, created through SessionRegistry
"""

from src.chat.controller import ConversationController
from src.chat.models import Message, Role, Transcript
from src.chat.session import SessionRegistry, get_session_registry

__all__ = [
    "ConversationController",
    "Message",
    "Role",
    "SessionRegistry",
    "Transcript",
    "get_session_registry",
]
