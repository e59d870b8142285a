"""PDF Chat - ask questions about an uploaded PDF using OpenAI or Anthropic.

Combines FastAPI for the JSON API, NiceGUI for the browser interface,
pypdf for text extraction, and Pydantic for validation and configuration.

Components:
    - api: HTTP endpoints over per-session controllers
    - chat: Transcript, conversation controller, session registry
    - credentials: Provider selection and API key persistence
    - ingestion: Validate, store and extract uploaded PDFs
    - parsing: Page-ordered PDF text extraction
    - providers: Uniform client over vendor chat APIs
    - storage: Best-effort R2 persistence of uploads
    - ui: Web interface for chat interactions
    - models: Request/response schemas
"""

__version__ = "0.1.0"
