"""Document ingestion pipeline.

Validate -> best-effort upload -> extract -> ready.

An upload failure never stops ingestion; a validation or extraction
failure never installs a document.
"""

from src.ingestion.errors import DocumentValidationError, ExtractionError, IngestionError
from src.ingestion.ingestor import (
    MAX_FILE_SIZE,
    PDF_CONTENT_TYPE,
    DocumentIngestor,
    validate_upload,
)
from src.ingestion.models import IngestedDocument, IngestState, UploadedFile

__all__ = [
    "MAX_FILE_SIZE",
    "PDF_CONTENT_TYPE",
    "DocumentIngestor",
    "DocumentValidationError",
    "ExtractionError",
    "IngestState",
    "IngestedDocument",
    "IngestionError",
    "UploadedFile",
    "validate_upload",
]
