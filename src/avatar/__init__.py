"""
AvatarAPI - Avatar Package
==========================

Seed resolution, option normalization, rendering and response shaping.
"""

from src.avatar.options import normalize_options
from src.avatar.renderer import AvatarRenderer, LocalRenderer, RenderResult
from src.avatar.responder import (
    AvatarRequest,
    AvatarResponder,
    AvatarResponse,
    OutputFormat,
)
from src.avatar.seed import resolve_seed, split_tail

__all__ = [
    "AvatarRenderer",
    "AvatarRequest",
    "AvatarResponder",
    "AvatarResponse",
    "LocalRenderer",
    "OutputFormat",
    "RenderResult",
    "normalize_options",
    "resolve_seed",
    "split_tail",
]
