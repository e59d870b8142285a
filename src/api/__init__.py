"""FastAPI endpoints for the PDF chat assistant.

JSON API over the same conversation controllers the browser UI uses.

Endpoints:
    - GET /health: Service health status
    - POST /credentials: Choose a provider and API key
    - POST /upload/pdf: Ingest a PDF as the active document
    - POST /chat: Ask a question about the active document
    - GET /sessions/{id}/messages: Session transcript
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
