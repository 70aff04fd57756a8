"""
AvatarAPI - Configuration
=========================

Central configuration management.
All values come from environment variables, read once at startup.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from src.core.constants import (
    DEFAULT_CACHE_CONTROL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_WORKERS,
)


# =============================================================================
# Paths
# =============================================================================

ROOT_DIR = Path(__file__).parent.parent.parent
LOGS_DIR = Path(os.getenv("AVATAR_LOGS_DIR", str(ROOT_DIR / "logs")))


def _get_env_int(key: str, default: int) -> int:
    """Get environment variable as int with default."""
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_env_bool(key: str, default: bool = False) -> bool:
    """Get environment variable as bool (1/true/yes) with default."""
    value = os.getenv(key)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes")


# =============================================================================
# Configuration
# =============================================================================

@dataclass(frozen=True)
class Config:
    """Process configuration - all from environment variables."""

    # Server settings
    HOST: str = field(default_factory=lambda: os.getenv("HOST", DEFAULT_HOST))
    PORT: int = field(default_factory=lambda: _get_env_int("PORT", DEFAULT_PORT))
    WORKERS: int = field(default_factory=lambda: _get_env_int("WORKERS", DEFAULT_WORKERS))

    # Response caching (seconds)
    CACHE_CONTROL: int = field(
        default_factory=lambda: _get_env_int("CACHE_CONTROL", DEFAULT_CACHE_CONTROL)
    )

    # Request logging toggle
    LOGGER: bool = field(default_factory=lambda: _get_env_bool("LOGGER"))

    # Webhook for error logs
    ERROR_WEBHOOK_URL: str = field(
        default_factory=lambda: os.getenv("AVATAR_ERROR_WEBHOOK_URL", "")
    )


config = Config()
