"""
AvatarAPI - Renderer
====================

Turns (style, options) into an SVG document and its JSON form.

The request layer only depends on the AvatarRenderer protocol, so the
engine can be swapped or stubbed without touching routing or CORS.
"""

from typing import Any, Dict, List, Mapping, Protocol, Tuple

from pydantic import BaseModel, Field

from src.avatar.coerce import read_bool, read_choices, read_colors, read_int, read_int_range
from src.avatar.prng import Prng
from src.avatar.thumbs import ThumbsStyle
from src.core.exceptions import InvalidOptionError, UnknownStyleError


BACKGROUND_TYPES = ["solid", "gradientLinear"]
VIEWBOX = 100


# =============================================================================
# Models
# =============================================================================

class RenderResult(BaseModel):
    """Rendered avatar: the SVG document plus derived metadata."""

    svg: str
    extra: Dict[str, Any] = Field(default_factory=dict)

    def to_json(self) -> str:
        return self.model_dump_json()

    def __str__(self) -> str:
        return self.svg


class AvatarRenderer(Protocol):
    """Capability the request layer needs from a rendering engine."""

    def render(self, style: str, options: Mapping[str, Any]) -> RenderResult:
        ...


# =============================================================================
# Helpers
# =============================================================================

def _num(value: float) -> str:
    """Format a number for SVG attributes without trailing zeros."""
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def _background_colors(prng: Prng, colors: List[str], background_type: str) -> Tuple[str, str]:
    shuffled = prng.shuffle(colors)
    if not shuffled:
        return "transparent", "transparent"

    primary = shuffled[0]
    if background_type == "gradientLinear" and len(shuffled) > 1:
        return primary, shuffled[1]
    return primary, primary


def _fill(color: str) -> str:
    return "transparent" if color == "transparent" else f"#{color}"


# =============================================================================
# Local Renderer
# =============================================================================

class LocalRenderer:
    """In-process renderer with a fixed registry of styles."""

    def __init__(self) -> None:
        self._styles = {ThumbsStyle.name: ThumbsStyle()}

    @property
    def styles(self) -> List[str]:
        return sorted(self._styles)

    def render(self, style: str, options: Mapping[str, Any]) -> RenderResult:
        if style not in self._styles:
            raise UnknownStyleError("Unknown avatar style", {"style": style})
        style_impl = self._styles[style]

        seed = options.get("seed", "")
        if not isinstance(seed, str):
            raise InvalidOptionError("Seed must be a string", option="seed", value=seed)

        flip = read_bool(options, "flip", False)
        clip = read_bool(options, "clip", True)
        rotate = read_int(options, "rotate", 0, 0, 360)
        scale = read_int(options, "scale", 100, 0, 200)
        radius = read_int(options, "radius", 0, 0, 50)
        size = read_int(options, "size", None, 1)
        translate_x = read_int(options, "translateX", 0, -100, 100)
        translate_y = read_int(options, "translateY", 0, -100, 100)
        background_colors = read_colors(
            options, "backgroundColor", style_impl.defaults.get("backgroundColor", [])
        )
        background_types = read_choices(options, "backgroundType", BACKGROUND_TYPES, ["solid"])
        background_rotation = read_int_range(options, "backgroundRotation", [0, 360], -360, 360)

        prng = Prng(seed)
        background_type = prng.pick(background_types, "solid")
        primary, secondary = _background_colors(prng, background_colors, background_type)
        rotation = prng.integer(min(background_rotation), max(background_rotation))

        body, style_extra = style_impl.create(prng, options)

        if scale != 100:
            factor = scale / 100
            offset = _num((1 - factor) * VIEWBOX / 2)
            body = f'<g transform="translate({offset} {offset}) scale({_num(factor)})">{body}</g>'
        if flip:
            body = f'<g transform="scale(-1 1) translate(-{VIEWBOX} 0)">{body}</g>'
        if translate_x or translate_y:
            body = f'<g transform="translate({translate_x} {translate_y})">{body}</g>'
        if rotate:
            body = f'<g transform="rotate({rotate} {VIEWBOX // 2} {VIEWBOX // 2})">{body}</g>'

        defs = []
        if background_type == "gradientLinear":
            defs.append(
                f'<linearGradient id="backgroundLinear" '
                f'gradientTransform="rotate({rotation} 0.5 0.5)">'
                f'<stop stop-color="{_fill(primary)}"/>'
                f'<stop offset="1" stop-color="{_fill(secondary)}"/>'
                '</linearGradient>'
            )
            background_fill = "url(#backgroundLinear)"
        else:
            background_fill = _fill(primary)

        content = f'<rect width="{VIEWBOX}" height="{VIEWBOX}" fill="{background_fill}"/>{body}'

        if clip or radius:
            ry = _num(radius * VIEWBOX / 100)
            defs.append(
                f'<mask id="viewboxMask"><rect width="{VIEWBOX}" height="{VIEWBOX}" '
                f'rx="{ry}" ry="{ry}" x="0" y="0" fill="#fff"/></mask>'
            )
            content = f'<g mask="url(#viewboxMask)">{content}</g>'

        size_attrs = f' width="{size}" height="{size}"' if size else ""
        svg = (
            f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {VIEWBOX} {VIEWBOX}"'
            f' fill="none" shape-rendering="auto"{size_attrs}>'
            f'<metadata><title>{style_impl.name}</title></metadata>'
            f'{"<defs>" + "".join(defs) + "</defs>" if defs else ""}'
            f'{content}'
            '</svg>'
        )

        extra = {
            **style_extra,
            "primaryBackgroundColor": primary,
            "secondaryBackgroundColor": secondary,
            "backgroundType": background_type,
            "backgroundRotation": rotation,
        }
        return RenderResult(svg=svg, extra=extra)


__all__ = ["AvatarRenderer", "LocalRenderer", "RenderResult"]
