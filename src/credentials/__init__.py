"""API key handling for AI providers.

Responsibilities:
    - Provider tags and the key prefix each provider issues
    - Credential validation
    - Persisting the selected provider and its key per browser profile

Keys are stored in plaintext in whatever mapping backs the store.
"""

from src.credentials.models import Credential, ProviderName
from src.credentials.store import CredentialStore

__all__ = ["Credential", "CredentialStore", "ProviderName"]
