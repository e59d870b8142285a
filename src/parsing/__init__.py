"""PDF text extraction for chat grounding.

Responsibilities:
    - Reading PDF bytes with pypdf
    - Collecting each page's text items in page order
    - Joining items and pages into the context string sent to providers

No chunking, truncation or cleanup: the joined text is used verbatim.
"""

from src.parsing.pdf_parser import PDFContent, PDFParseError, join_pages, parse_pdf

__all__ = ["PDFContent", "PDFParseError", "join_pages", "parse_pdf"]
