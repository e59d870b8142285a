"""PDF upload endpoint for document ingestion.

Hands the file to the session's controller, which validates, stores
(best-effort), and extracts it.
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, UploadFile, status

from src.api.deps import BUSY_DETAIL, find_session, get_registry
from src.chat.session import SessionRegistry
from src.ingestion.errors import DocumentValidationError
from src.ingestion.ingestor import MAX_FILE_SIZE
from src.ingestion.models import UploadedFile
from src.models.schemas import PDFUploadResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/upload", tags=["upload"])


@router.post("/pdf", response_model=PDFUploadResponse)
async def upload_pdf(
    file: UploadFile,
    session_id: str,
    registry: Annotated[SessionRegistry, Depends(get_registry)],
) -> PDFUploadResponse:
    """Upload a PDF and make it the session's active document.

    Args:
        file: The uploaded PDF file (multipart/form-data).
        session_id: Session to attach the document to, as returned by POST /credentials.

    Returns:
        PDFUploadResponse with filename, page count, and stored URL.

    Raises:
        400: Not a PDF, or the PDF could not be processed.
        404: Unknown session id.
        409: Another request for the session is in flight.
        413: File exceeds 50MB.
    """
    if not file.filename:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Filename is required",
        )

    controller = await find_session(registry, session_id)
    upload = UploadedFile(
        name=file.filename,
        content_type=file.content_type or "",
        data=await file.read(),
    )

    # No await between this check and the controller setting its busy flag
    if controller.is_busy:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=BUSY_DETAIL)

    document = await controller.upload(upload)
    if document is None:
        code = status.HTTP_400_BAD_REQUEST
        if isinstance(controller.failure, DocumentValidationError) and upload.size > MAX_FILE_SIZE:
            code = status.HTTP_413_CONTENT_TOO_LARGE
        logger.warning(f"Upload failed for {upload.name}: {controller.error}")
        raise HTTPException(status_code=code, detail=controller.error)

    return PDFUploadResponse(
        session_id=session_id,
        filename=document.name,
        pages=document.pages,
        success=True,
        url=document.url,
    )
