"""Integration tests for components working together as a system.

Coverage:
    - API endpoints with real HTTP requests over ASGI transport
    - PDF parsing with real PDF bytes
    - Full workflow from credentials to upload to answer

Vendor clients and the object store are doubles; everything else is real.
"""
