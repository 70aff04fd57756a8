"""
AvatarAPI - Avatar Responder
============================

Resolves seed and options for a request, calls the renderer and shapes
the HTTP response (format, caching and robots headers).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Mapping, Optional

from src.avatar.options import normalize_options
from src.avatar.renderer import AvatarRenderer
from src.avatar.seed import resolve_seed
from src.core import log
from src.core.constants import AVATAR_STYLE, FORMAT_PARAM, SEED_PARAM


# =============================================================================
# Models
# =============================================================================

class OutputFormat(str, Enum):
    SVG = "svg"
    JSON = "json"

    @classmethod
    def from_query(cls, raw_query: Mapping[str, List[str]]) -> "OutputFormat":
        """JSON only for exactly ``format=json``; everything else is SVG."""
        if list(raw_query.get(FORMAT_PARAM, [])) == [cls.JSON.value]:
            return cls.JSON
        return cls.SVG


MEDIA_TYPES = {
    OutputFormat.SVG: "image/svg+xml",
    OutputFormat.JSON: "application/json",
}


@dataclass
class AvatarRequest:
    """One avatar request, already split into seed segments and query."""

    seed_head: str
    seed_tail: List[str] = field(default_factory=list)
    raw_query: Dict[str, List[str]] = field(default_factory=dict)
    origin: Optional[str] = None


@dataclass
class AvatarResponse:
    """Framework-neutral response produced by the responder."""

    body: str
    media_type: str
    headers: Dict[str, str] = field(default_factory=dict)
    status: int = 200


# =============================================================================
# Responder
# =============================================================================

class AvatarResponder:
    """Builds avatar responses for a fixed style."""

    def __init__(
        self,
        renderer: AvatarRenderer,
        cache_control: int,
        style: str = AVATAR_STYLE,
    ) -> None:
        self._renderer = renderer
        self._cache_control = cache_control
        self._style = style

    def respond(self, request: AvatarRequest) -> AvatarResponse:
        output_format = OutputFormat.from_query(request.raw_query)
        options = normalize_options(request.raw_query)
        seed = resolve_seed(request.seed_head, request.seed_tail)

        # The path is the only source of the seed
        options[SEED_PARAM] = seed

        # Renderer errors propagate to the app's exception handler
        avatar = self._renderer.render(self._style, options)

        headers = {
            "X-Robots-Tag": "noindex",
            "Cache-Control": f"max-age={self._cache_control}",
            "Content-Disposition": f'inline; filename="avatar.{output_format.value}"',
        }

        if output_format is OutputFormat.JSON:
            body = avatar.to_json()
        else:
            body = avatar.svg

        log.debug("Avatar Rendered", [
            ("Seed", seed[:50]),
            ("Format", output_format.value),
            ("Options", str(len(options) - 1)),
        ])

        return AvatarResponse(
            body=body,
            media_type=MEDIA_TYPES[output_format],
            headers=headers,
        )


__all__ = [
    "AvatarRequest",
    "AvatarResponder",
    "AvatarResponse",
    "OutputFormat",
]
