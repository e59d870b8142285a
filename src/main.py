"""Main application entry point.

Runs FastAPI (port 8000) with NiceGUI mounted for the chat interface.
Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI handles API routes, NiceGUI handles the UI.
    Both accessible on port 8000.
    """
    import uvicorn
    from nicegui import ui

    from src.api.app import create_app
    from src.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # NiceGUI's per-browser storage holds the saved provider and API keys
    ui.run_with(
        app,
        title="PDF Chat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "pdf-chat-secret"),
    )

    logger.info("Starting integrated server on http://localhost:8000")
    logger.info("API docs available at http://localhost:8000/docs")
    logger.info("Chat UI available at http://localhost:8000/")

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_ui_only() -> None:
    """Run only the NiceGUI interface on port 8080."""
    from src.ui.chat_page import main as run_ui

    logger.info("Starting NiceGUI on http://localhost:8080")
    run_ui()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=ui to serve only the browser interface.
    Default is integrated mode (API and UI on port 8000).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting PDF Chat in {mode} mode")

    if mode == "ui":
        run_ui_only()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
