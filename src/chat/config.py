"""Session lifetime settings with environment variable loading."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

load_dotenv()


class SessionConfig(BaseModel):
    """Limits on the API sessions kept in memory.

    Attributes:
        max_sessions: Registered sessions kept at once; the least recently
            used idle session is evicted to make room.
        idle_ttl: Seconds a session may go unused before it is evicted.
    """

    max_sessions: int = Field(
        default_factory=lambda: int(os.getenv("SESSION_MAX_COUNT", "1000")),
        ge=1,
        description="Maximum number of registered sessions",
    )
    idle_ttl: float = Field(
        default_factory=lambda: float(os.getenv("SESSION_IDLE_TTL", "3600")),
        gt=0.0,
        description="Idle seconds before a session is evicted",
    )


def get_session_config() -> SessionConfig:
    """Create session configuration from environment.

    Returns:
        Configured SessionConfig instance.
    """
    return SessionConfig()
