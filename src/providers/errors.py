"""Exceptions raised by the provider layer."""

from enum import Enum


class ProviderErrorKind(str, Enum):
    """Normalized categories of vendor failures."""

    AUTH_FAILURE = "auth_failure"
    NETWORK_FAILURE = "network_failure"
    QUOTA_EXCEEDED = "quota_exceeded"
    UNSUPPORTED = "unsupported"


class ProviderError(Exception):
    """Raised when a vendor chat call fails.

    Attributes:
        kind: Normalized failure category.
        provider: Provider tag the failing adapter belongs to.
    """

    def __init__(self, kind: ProviderErrorKind, message: str, provider: str = "") -> None:
        super().__init__(message)
        self.kind = kind
        self.provider = provider


class UnsupportedProviderError(ValueError):
    """Raised when asked for a provider outside the supported set."""

    pass


class AuthInitError(Exception):
    """Raised when a vendor client cannot be constructed from a key."""

    pass
