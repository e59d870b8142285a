"""Unit tests for individual components in isolation.

Ensures fast execution with minimal dependencies.

Coverage:
    - credentials/: Key validation and persisted selection
    - providers/: Adapters, error normalization, factory dispatch
    - parsing/: Page-ordered text extraction
    - storage/: Object keys and R2 client calls
    - ingestion/: Pipeline states and failure policy
    - chat/: Transcript and controller behavior

Vendor SDKs and the object store are replaced with doubles.
"""
