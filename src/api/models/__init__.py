"""
AvatarAPI - API Models
======================

Pydantic models for API responses.
"""

from src.api.models.base import APIResponse

__all__ = ["APIResponse"]
