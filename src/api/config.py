"""
AvatarAPI - API Configuration
=============================

Configuration for the FastAPI server.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.config import config as core_config
from src.core.constants import (
    DEFAULT_CACHE_CONTROL,
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_WORKERS,
)
from src.core.exceptions import InvalidConfigError


@dataclass
class APIConfig:
    """API server configuration."""

    # Server settings
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    workers: int = DEFAULT_WORKERS

    # Response caching (seconds)
    cache_control: int = DEFAULT_CACHE_CONTROL

    # Request logging
    logger: bool = False

    def validate(self) -> "APIConfig":
        """Raise InvalidConfigError for values the server cannot run with."""
        if not 0 < self.port < 65536:
            raise InvalidConfigError("Port out of range", {"port": self.port})
        if self.workers < 1:
            raise InvalidConfigError("Workers must be at least 1", {"workers": self.workers})
        if self.cache_control < 0:
            raise InvalidConfigError(
                "Cache-Control seconds cannot be negative",
                {"cache_control": self.cache_control},
            )
        return self


_config: Optional[APIConfig] = None


def get_api_config() -> APIConfig:
    """Get or create API configuration from environment."""
    global _config
    if _config is None:
        _config = APIConfig(
            host=core_config.HOST,
            port=core_config.PORT,
            workers=core_config.WORKERS,
            cache_control=core_config.CACHE_CONTROL,
            logger=core_config.LOGGER,
        ).validate()
    return _config


__all__ = ["APIConfig", "get_api_config"]
