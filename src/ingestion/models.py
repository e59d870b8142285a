"""Types flowing through the ingestion pipeline."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class IngestState(str, Enum):
    """Pipeline states. FAILED is reachable from VALIDATING and EXTRACTING."""

    IDLE = "idle"
    VALIDATING = "validating"
    UPLOADING = "uploading"
    EXTRACTING = "extracting"
    READY = "ready"
    FAILED = "failed"


class UploadedFile(BaseModel):
    """A file as received from the browser.

    Attributes:
        name: Original filename.
        content_type: MIME type reported by the browser.
        data: Raw file bytes, held only for the duration of ingestion.
    """

    name: str
    content_type: str
    data: bytes = Field(repr=False)

    @property
    def size(self) -> int:
        return len(self.data)


class IngestedDocument(BaseModel):
    """The active document whose text grounds the conversation.

    Attributes:
        name: Original filename.
        extracted_text: Joined page text, used verbatim as provider context.
        pages: Number of pages read.
        url: Signed URL of the stored copy, None when persistence failed or is off.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    extracted_text: str
    pages: int = Field(ge=0)
    url: str | None = None
