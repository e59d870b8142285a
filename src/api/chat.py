"""Credential, chat and transcript endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.deps import BUSY_DETAIL, find_session, get_registry
from src.chat.controller import NO_CREDENTIALS_ERROR
from src.chat.session import SessionRegistry
from src.models.schemas import (
    ChatMessage,
    ChatRequest,
    ChatResponse,
    CredentialRequest,
    CredentialResponse,
)
from src.providers.errors import AuthInitError, ProviderError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["chat"])

Registry = Annotated[SessionRegistry, Depends(get_registry)]


@router.post("/credentials", response_model=CredentialResponse)
async def set_credentials(request: CredentialRequest, registry: Registry) -> CredentialResponse:
    """Activate a provider client for the session.

    Raises:
        400: Malformed API key.
        401: The vendor SDK rejected the key at construction.
        404: Unknown session id.
        422: Unknown provider.
    """
    if request.session_id is None:
        controller = registry.create_controller()
    else:
        controller = await find_session(registry, request.session_id)

    if not await controller.configure(request.provider, request.api_key):
        code = (
            status.HTTP_401_UNAUTHORIZED
            if isinstance(controller.failure, AuthInitError)
            else status.HTTP_400_BAD_REQUEST
        )
        raise HTTPException(status_code=code, detail=controller.error)

    session_id = request.session_id or await registry.add(controller)
    return CredentialResponse(session_id=session_id, provider=controller.provider)


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, registry: Registry) -> ChatResponse:
    """Answer a question, grounded in the session's active document.

    Raises:
        401: No provider credentials for the session.
        404: Unknown session id.
        409: Another request for the session is in flight.
        422: Empty or too long message.
        502: The provider call failed.
    """
    if request.session_id is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NO_CREDENTIALS_ERROR)
    session_id = request.session_id
    controller = await find_session(registry, session_id)

    if controller.is_busy:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=BUSY_DETAIL)
    if controller.client is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=NO_CREDENTIALS_ERROR)

    reply = await controller.submit(request.message)
    if reply is None:
        failure = controller.failure
        kind = failure.kind.value if isinstance(failure, ProviderError) else "unknown"
        logger.warning(f"Chat failed for session {session_id}: {kind}")
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=f"{controller.error} ({kind})",
        )

    return ChatResponse(response=reply.content, session_id=session_id)


@router.get("/sessions/{session_id}/messages", response_model=list[ChatMessage])
async def get_messages(session_id: str, registry: Registry) -> list[ChatMessage]:
    """Return the session transcript in order."""
    controller = await find_session(registry, session_id)
    return [
        ChatMessage(role=message.role.value, content=message.content)
        for message in controller.transcript
    ]
