"""
AvatarAPI - API Middleware
==========================
"""

from .logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
