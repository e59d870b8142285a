"""Document ingestor: validation, best-effort persistence, text extraction."""

import asyncio
import logging
from collections.abc import Callable

from src.ingestion.errors import DocumentValidationError, ExtractionError
from src.ingestion.models import IngestedDocument, IngestState, UploadedFile
from src.parsing.pdf_parser import PDFContent, parse_pdf
from src.storage.object_store import SIGNED_URL_TTL_SECONDS, ObjectStore, build_object_key

logger = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
MAX_FILE_SIZE = 50_000_000  # 50MB


def validate_upload(upload: UploadedFile) -> None:
    """Check type and size before any upload or extraction.

    Raises:
        DocumentValidationError: With a user-facing message.
    """
    if upload.content_type != PDF_CONTENT_TYPE:
        raise DocumentValidationError("Only PDF files are allowed")
    if upload.size > MAX_FILE_SIZE:
        raise DocumentValidationError("File size must be less than 50MB")


class DocumentIngestor:
    """Turns an uploaded PDF into an IngestedDocument.

    State moves IDLE -> VALIDATING -> (UPLOADING) -> EXTRACTING -> READY,
    or to FAILED from VALIDATING or EXTRACTING. UPLOADING is skipped when no
    object store is configured, and its failures never reach FAILED.
    """

    def __init__(
        self,
        object_store: ObjectStore | None = None,
        extractor: Callable[[bytes], PDFContent] = parse_pdf,
    ) -> None:
        self._object_store = object_store
        self._extractor = extractor
        self.state = IngestState.IDLE

    async def ingest(self, upload: UploadedFile) -> IngestedDocument:
        """Run the pipeline for one file.

        Args:
            upload: The file received from the user.

        Returns:
            The ingested document with its extracted text.

        Raises:
            DocumentValidationError: Wrong MIME type or file too large.
            ExtractionError: The PDF could not be parsed.
        """
        self.state = IngestState.VALIDATING
        try:
            validate_upload(upload)
        except DocumentValidationError as e:
            logger.info(f"Rejected upload {upload.name}: {e}")
            self.state = IngestState.FAILED
            raise

        url = None
        if self._object_store is not None:
            self.state = IngestState.UPLOADING
            url = await self._persist(upload)

        self.state = IngestState.EXTRACTING
        try:
            content = await asyncio.to_thread(self._extractor, upload.data)
        except Exception as e:
            logger.error(f"PDF processing error for {upload.name}: {e}")
            self.state = IngestState.FAILED
            raise ExtractionError("Failed to process PDF file") from e

        self.state = IngestState.READY
        logger.info(f"Ingested PDF: {upload.name} ({content.pages} pages)")
        return IngestedDocument(
            name=upload.name,
            extracted_text=content.text,
            pages=content.pages,
            url=url,
        )

    async def _persist(self, upload: UploadedFile) -> str | None:
        """Store the raw bytes and return a signed URL, or None on any failure."""
        key = build_object_key(upload.name)
        try:
            await self._object_store.put(key, upload.data, upload.content_type)
            return await self._object_store.signed_get_url(key, SIGNED_URL_TTL_SECONDS)
        except Exception as e:
            # Local processing continues without the stored copy
            logger.warning(f"Failed to upload to R2: {e}")
            return None
