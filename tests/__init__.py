"""Test package for PDF Chat.

Structure:
    - unit/: Individual function and class tests
    - integration/: API workflows over ASGI transport
    - fakes.py: Provider, object store and PDF doubles

Leverages pytest with pytest-check for soft assertions.
"""
