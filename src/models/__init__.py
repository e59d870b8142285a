"""Pydantic models for API requests and responses.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - ChatRequest: Incoming chat message, length-checked
    - ChatResponse: Assistant reply
    - CredentialRequest / CredentialResponse: Provider and API key setup
    - PDFUploadResponse: Result of document ingestion
    - ChatMessage: Transcript entry
"""

from src.models.schemas import (
    MAX_MESSAGE_LENGTH,
    ChatMessage,
    ChatRequest,
    ChatResponse,
    CredentialRequest,
    CredentialResponse,
    PDFUploadResponse,
    first_error_message,
)

__all__ = [
    "MAX_MESSAGE_LENGTH",
    "ChatMessage",
    "ChatRequest",
    "ChatResponse",
    "CredentialRequest",
    "CredentialResponse",
    "PDFUploadResponse",
    "first_error_message",
]
