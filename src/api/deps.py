"""Shared FastAPI dependencies."""

from fastapi import HTTPException, Request, status

from src.chat.controller import ConversationController
from src.chat.session import SessionRegistry

BUSY_DETAIL = "A request for this session is already in progress"


def get_registry(request: Request) -> SessionRegistry:
    """Return the session registry attached to the running app."""
    return request.app.state.registry


async def find_session(registry: SessionRegistry, session_id: str) -> ConversationController:
    """Return the registered controller for ``session_id``.

    Raises:
        HTTPException: 404 if the session is unknown or has expired.
    """
    controller = await registry.get(session_id)
    if controller is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return controller
