"""PDF parsing module using pypdf.

Extracts each page's text items in page order and joins them into one string.
"""

import io
import logging
from collections.abc import Sequence
from typing import Any

from pydantic import BaseModel, Field
from pypdf import PageObject, PdfReader
from pypdf.errors import PdfReadError

logger = logging.getLogger(__name__)

PDF_MAGIC_BYTES = b"%PDF"


class PDFContent(BaseModel):
    """Extracted content from a PDF file.

    Attributes:
        text: Page texts joined in page order.
        pages: Total number of pages in the document.
    """

    text: str
    pages: int = Field(ge=0)


class PDFParseError(Exception):
    """Raised when PDF parsing fails."""

    pass


def _validate_pdf_bytes(file_content: bytes) -> None:
    """Reject content that cannot be a PDF before handing it to pypdf.

    Raises:
        PDFParseError: If the content is empty or lacks a PDF header.
    """
    if not file_content:
        raise PDFParseError("Empty file provided")

    if not file_content.lstrip()[:10].startswith(PDF_MAGIC_BYTES):
        raise PDFParseError("Invalid PDF: file does not start with PDF header")


def _page_items(page: PageObject) -> list[str]:
    """Return the text items pypdf emits for one page, in content-stream order."""
    items: list[str] = []

    def visit(text: str, *_: Any) -> None:
        if text:
            items.append(text)

    page.extract_text(visitor_text=visit)
    return items


def join_pages(pages: Sequence[Sequence[str]]) -> str:
    """Join text items with single spaces, each page followed by one space.

    Example:
        >>> join_pages([["A"], ["B"], ["C"]])
        'A B C '
    """
    return "".join(" ".join(items) + " " for items in pages)


def parse_pdf(file_content: bytes) -> PDFContent:
    """Parse a PDF file and extract its text content.

    Pages are read strictly in order 1..N; later pages always follow
    earlier ones in the joined text.

    Args:
        file_content: Raw bytes of the PDF file.

    Returns:
        PDFContent with joined text and page count.

    Raises:
        PDFParseError: If the file is empty, not a PDF, or corrupt.
    """
    _validate_pdf_bytes(file_content)

    try:
        reader = PdfReader(io.BytesIO(file_content))
        pages = [_page_items(page) for page in reader.pages]
    except PdfReadError as e:
        raise PDFParseError(f"Corrupt or invalid PDF: {e}") from e
    except Exception as e:
        raise PDFParseError(f"Failed to read PDF: {e}") from e

    text = join_pages(pages)
    if not text.strip():
        logger.warning("PDF contains no extractable text (may be scanned/image-based)")

    return PDFContent(text=text, pages=len(pages))
