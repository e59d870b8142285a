"""Test doubles for vendor clients, the object store, and PDF bytes."""

import asyncio

from src.providers.errors import ProviderError, ProviderErrorKind


class FakeProviderClient:
    """ProviderClient that records calls and returns a canned reply."""

    def __init__(self, reply: str = "Fake answer", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str | None]] = []
        self.closed = False

    async def process_message(self, user_text: str, document_context: str | None = None) -> str:
        self.calls.append((user_text, document_context))
        # Suspend like a real network call would
        await asyncio.sleep(0)
        if self.error is not None:
            raise self.error
        return self.reply

    async def aclose(self) -> None:
        self.closed = True


class ContextEchoClient(FakeProviderClient):
    """Answers with the document context it was given."""

    async def process_message(self, user_text: str, document_context: str | None = None) -> str:
        await super().process_message(user_text, document_context)
        return f"Based on the document: {document_context}"


def network_failure() -> ProviderError:
    return ProviderError(ProviderErrorKind.NETWORK_FAILURE, "connection reset", provider="openai")


class FakeObjectStore:
    """In-memory ObjectStore that can be told to fail."""

    def __init__(self, fail_put: bool = False, fail_sign: bool = False) -> None:
        self.fail_put = fail_put
        self.fail_sign = fail_sign
        self.puts: list[tuple[str, bytes, str]] = []
        self.signed: list[tuple[str, int]] = []

    async def put(self, key: str, data: bytes, content_type: str) -> None:
        if self.fail_put:
            raise RuntimeError("R2 unavailable")
        self.puts.append((key, data, content_type))

    async def signed_get_url(self, key: str, ttl_seconds: int) -> str:
        if self.fail_sign:
            raise RuntimeError("signing failed")
        self.signed.append((key, ttl_seconds))
        return f"https://r2.example.com/{key}?expires={ttl_seconds}"


def build_pdf(page_texts: list[str]) -> bytes:
    """Build a minimal PDF with one line of Helvetica text per page.

    Texts must not contain parentheses or backslashes.
    """
    page_ids = [4 + 2 * i for i in range(len(page_texts))]
    kids = " ".join(f"{page_id} 0 R" for page_id in page_ids)

    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        f"<< /Type /Pages /Kids [{kids}] /Count {len(page_texts)} >>".encode(),
        b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>",
    ]
    for page_id, text in zip(page_ids, page_texts, strict=True):
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 3 0 R >> >> /Contents {page_id + 1} 0 R >>"
            ).encode()
        )
        stream = f"BT /F1 12 Tf 72 720 Td ({text}) Tj ET".encode()
        objects.append(b"<< /Length %d >>\nstream\n" % len(stream) + stream + b"\nendstream")

    out = bytearray(b"%PDF-1.4\n")
    offsets: list[int] = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += b"%d 0 obj\n" % number + body + b"\nendobj\n"

    xref_position = len(out)
    out += b"xref\n0 %d\n" % (len(objects) + 1)
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += b"%010d 00000 n \n" % offset
    out += b"trailer\n<< /Size %d /Root 1 0 R >>\nstartxref\n%d\n%%%%EOF\n" % (
        len(objects) + 1,
        xref_position,
    )
    return bytes(out)
