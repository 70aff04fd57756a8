"""
AvatarAPI - API Package
=======================

FastAPI-based HTTP facade for avatar generation.

Features:
- GET /{seed} and GET /{seed}/{path...} avatar endpoints
- SVG or JSON output (?format=json)
- Allow-listed CORS
- Optional request logging
"""

from src.api.config import get_api_config, APIConfig
from src.api.app import create_app

__all__ = [
    # Config
    "get_api_config",
    "APIConfig",
    # App factory
    "create_app",
]
