"""Exceptions raised while ingesting a document.

Messages are user-facing.
"""


class IngestionError(Exception):
    """Base class for ingestion failures."""

    pass


class DocumentValidationError(IngestionError):
    """Raised when an upload has the wrong type or size."""

    pass


class ExtractionError(IngestionError):
    """Raised when text cannot be extracted from the PDF."""

    pass
