"""Unit tests for the document ingestion pipeline."""

from unittest.mock import MagicMock

import pytest

from src.ingestion.errors import DocumentValidationError, ExtractionError
from src.ingestion.ingestor import MAX_FILE_SIZE, DocumentIngestor
from src.ingestion.models import IngestState, UploadedFile
from src.parsing.pdf_parser import PDFContent, join_pages
from tests.fakes import FakeObjectStore, build_pdf


def three_page_extractor(data: bytes) -> PDFContent:
    """Extractor whose pages read "A", "B", "C"."""
    return PDFContent(text=join_pages([["A"], ["B"], ["C"]]), pages=3)


def pdf_upload(name: str = "report.pdf", data: bytes = b"%PDF-1.4 fake") -> UploadedFile:
    return UploadedFile(name=name, content_type="application/pdf", data=data)


class TestIngestSuccess:
    """Tests for the happy path."""

    async def test_ready_with_ordered_text(self) -> None:
        """A 3-page PDF reading A, B, C yields "A B C "."""
        ingestor = DocumentIngestor(FakeObjectStore(), extractor=three_page_extractor)

        document = await ingestor.ingest(pdf_upload())

        assert document.extracted_text == "A B C "
        assert document.pages == 3
        assert document.name == "report.pdf"
        assert ingestor.state == IngestState.READY

    async def test_persists_raw_bytes_under_timestamped_key(self) -> None:
        store = FakeObjectStore()
        ingestor = DocumentIngestor(store, extractor=three_page_extractor)

        document = await ingestor.ingest(pdf_upload(data=b"%PDF raw"))

        ((key, data, content_type),) = store.puts
        assert key.startswith("pdfs/")
        assert key.endswith("-report.pdf")
        assert data == b"%PDF raw"
        assert content_type == "application/pdf"
        assert store.signed == [(key, 86400)]
        assert document.url == f"https://r2.example.com/{key}?expires=86400"

    async def test_without_object_store_skips_upload(self) -> None:
        ingestor = DocumentIngestor(None, extractor=three_page_extractor)

        document = await ingestor.ingest(pdf_upload())

        assert document.url is None
        assert ingestor.state == IngestState.READY

    async def test_real_pdf_bytes(self) -> None:
        ingestor = DocumentIngestor()

        document = await ingestor.ingest(pdf_upload(data=build_pdf(["First", "Second"])))

        assert document.pages == 2
        assert document.extracted_text.index("First") < document.extracted_text.index("Second")


class TestUploadFailureIsolation:
    """Object store failures never stop ingestion."""

    async def test_put_failure_still_reaches_ready(self) -> None:
        """A throwing put leaves correct text and raises nothing."""
        ingestor = DocumentIngestor(FakeObjectStore(fail_put=True), extractor=three_page_extractor)

        document = await ingestor.ingest(pdf_upload())

        assert document.extracted_text == "A B C "
        assert document.url is None
        assert ingestor.state == IngestState.READY

    async def test_signing_failure_still_reaches_ready(self) -> None:
        ingestor = DocumentIngestor(
            FakeObjectStore(fail_sign=True), extractor=three_page_extractor
        )

        document = await ingestor.ingest(pdf_upload())

        assert document.extracted_text == "A B C "
        assert document.url is None


class TestValidation:
    """Validation runs before any upload or extraction."""

    async def test_rejects_plain_text_before_upload_or_extraction(self) -> None:
        store = FakeObjectStore()
        extractor = MagicMock(side_effect=three_page_extractor)
        ingestor = DocumentIngestor(store, extractor=extractor)
        upload = UploadedFile(name="notes.txt", content_type="text/plain", data=b"hello")

        with pytest.raises(DocumentValidationError, match="Only PDF files are allowed"):
            await ingestor.ingest(upload)

        assert store.puts == []
        extractor.assert_not_called()
        assert ingestor.state == IngestState.FAILED

    async def test_rejects_oversized_file_with_size_message(self) -> None:
        store = FakeObjectStore()
        ingestor = DocumentIngestor(store, extractor=three_page_extractor)

        with pytest.raises(DocumentValidationError, match="File size must be less than 50MB"):
            await ingestor.ingest(pdf_upload(data=b"\x00" * 60_000_000))

        assert store.puts == []
        assert ingestor.state == IngestState.FAILED

    async def test_accepts_file_at_size_limit(self) -> None:
        ingestor = DocumentIngestor(None, extractor=three_page_extractor)

        document = await ingestor.ingest(pdf_upload(data=b"\x00" * MAX_FILE_SIZE))

        assert document.extracted_text == "A B C "


class TestExtractionFailure:
    """Extraction errors surface as ExtractionError."""

    async def test_extractor_exception_fails_pipeline(self) -> None:
        def broken(data: bytes) -> PDFContent:
            raise ValueError("bad xref")

        ingestor = DocumentIngestor(FakeObjectStore(), extractor=broken)

        with pytest.raises(ExtractionError, match="Failed to process PDF file"):
            await ingestor.ingest(pdf_upload())

        assert ingestor.state == IngestState.FAILED

    async def test_corrupt_pdf_fails_pipeline(self) -> None:
        ingestor = DocumentIngestor()

        with pytest.raises(ExtractionError):
            await ingestor.ingest(pdf_upload(data=b"%PDF-1.4\n1 0 obj\n<<"))
