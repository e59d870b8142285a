from pydantic import BaseModel, Field, ValidationError, field_validator

from src.credentials.models import ProviderName

MAX_MESSAGE_LENGTH = 1000


def first_error_message(error: ValidationError) -> str:
    """Return the first validation message without pydantic's prefix."""
    message = error.errors()[0]["msg"]
    return message.removeprefix("Value error, ")


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's question, 1 to 1000 characters after stripping.
        session_id: Optional session for conversation continuity.
    """

    message: str
    session_id: str | None = None

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("message")
    @classmethod
    def check_length(cls, v: str) -> str:
        if not v:
            raise ValueError("Message cannot be empty")
        if len(v) > MAX_MESSAGE_LENGTH:
            raise ValueError("Message is too long")
        return v


class ChatResponse(BaseModel):
    """Assistant reply for one chat request."""

    response: str
    session_id: str


class CredentialRequest(BaseModel):
    """Provider selection and API key submitted by the user.

    Attributes:
        provider: One of openai, anthropic, google.
        api_key: Key for that provider.
        session_id: Optional session to bind the credential to.
    """

    provider: ProviderName
    api_key: str = Field(..., repr=False)
    session_id: str | None = None


class CredentialResponse(BaseModel):
    """Confirmation that a provider client is active for the session."""

    session_id: str
    provider: ProviderName


class PDFUploadResponse(BaseModel):
    """Response after PDF upload processing.

    Attributes:
        session_id: Session the document is now active in.
        filename: Name of the uploaded file.
        pages: Number of pages in the document.
        success: Whether the upload was successful.
        url: Signed URL of the stored copy, when persistence succeeded.
    """

    session_id: str
    filename: str
    pages: int
    success: bool
    url: str | None = None


class ChatMessage(BaseModel):
    """A transcript entry as returned by the API."""

    role: str
    content: str
