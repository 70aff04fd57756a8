"""
AvatarAPI - Thumbs Style
========================

A rounded "thumb" shape with a small face on it. Every visual choice is
drawn from the seeded PRNG, so identical options give identical markup.
"""

from typing import Any, Dict, Mapping, Tuple

from src.avatar.coerce import read_choices, read_colors, read_int_range
from src.avatar.prng import Prng


# =============================================================================
# Variants
# =============================================================================

EYES = {
    "variant1": (
        '<circle cx="38" cy="45" r="4" fill="#{color}"/>'
        '<circle cx="62" cy="45" r="4" fill="#{color}"/>'
    ),
    "variant2": (
        '<ellipse cx="38" cy="45" rx="3" ry="5" fill="#{color}"/>'
        '<ellipse cx="62" cy="45" rx="3" ry="5" fill="#{color}"/>'
    ),
    "variant3": (
        '<rect x="34" y="42" width="8" height="6" rx="2" fill="#{color}"/>'
        '<rect x="58" y="42" width="8" height="6" rx="2" fill="#{color}"/>'
    ),
    "variant4": (
        '<path d="M33 46q5-5 10 0M57 46q5-5 10 0" fill="none" '
        'stroke="#{color}" stroke-width="2.5" stroke-linecap="round"/>'
    ),
    "variant5": (
        '<circle cx="38" cy="45" r="6" fill="#fff"/><circle cx="39" cy="45" r="3" fill="#{color}"/>'
        '<circle cx="62" cy="45" r="6" fill="#fff"/><circle cx="63" cy="45" r="3" fill="#{color}"/>'
    ),
    "variant6": (
        '<path d="M33 45h10M57 45h10" fill="none" '
        'stroke="#{color}" stroke-width="3" stroke-linecap="round"/>'
    ),
    "variant7": (
        '<circle cx="38" cy="45" r="4" fill="#{color}"/>'
        '<path d="M57 46q5-5 10 0" fill="none" stroke="#{color}" '
        'stroke-width="2.5" stroke-linecap="round"/>'
    ),
    "variant8": (
        '<circle cx="38" cy="45" r="2.5" fill="#{color}"/>'
        '<circle cx="62" cy="45" r="2.5" fill="#{color}"/>'
    ),
}

MOUTHS = {
    "variant1": (
        '<path d="M40 60q10 9 20 0" fill="none" stroke="#{color}" '
        'stroke-width="3" stroke-linecap="round"/>'
    ),
    "variant2": (
        '<path d="M42 62h16" fill="none" stroke="#{color}" '
        'stroke-width="3" stroke-linecap="round"/>'
    ),
    "variant3": '<ellipse cx="50" cy="63" rx="6" ry="4" fill="#{color}"/>',
    "variant4": '<circle cx="50" cy="63" r="3" fill="#{color}"/>',
    "variant5": '<path d="M38 59h24q-2 10-12 10t-12-10z" fill="#{color}"/>',
}

SHAPE = '<path d="M95 53.33C95 29.4 74.85 10 50 10S5 29.4 5 53.33V140h90V53.33Z" fill="#{color}"/>'


# =============================================================================
# Style
# =============================================================================

class ThumbsStyle:
    """Renderer style with a coloured shape and a face."""

    name = "thumbs"

    defaults: Dict[str, Any] = {
        "backgroundColor": ["69d2e7", "f1f4dc", "f88c49", "0a5b83", "1c799f"],
        "shapeColor": ["0a5b83", "1c799f", "69d2e7", "f1f4dc", "f88c49"],
        "eyesColor": ["000000", "ffffff"],
        "mouthColor": ["000000", "ffffff"],
    }

    def create(self, prng: Prng, options: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
        """Return the SVG body markup and the style's extra fields."""
        shape_colors = read_colors(options, "shapeColor", self.defaults["shapeColor"])
        eyes_colors = read_colors(options, "eyesColor", self.defaults["eyesColor"])
        mouth_colors = read_colors(options, "mouthColor", self.defaults["mouthColor"])
        eyes_variants = read_choices(options, "eyes", list(EYES))
        mouth_variants = read_choices(options, "mouth", list(MOUTHS))

        shape_offset_x = read_int_range(options, "shapeOffsetX", [0, 0], -100, 100)
        shape_offset_y = read_int_range(options, "shapeOffsetY", [0, 0], -100, 100)
        shape_rotation = read_int_range(options, "shapeRotation", [-20, 20], -360, 360)
        face_offset_x = read_int_range(options, "faceOffsetX", [-15, 15], -100, 100)
        face_offset_y = read_int_range(options, "faceOffsetY", [-15, 15], -100, 100)
        face_rotation = read_int_range(options, "faceRotation", [-20, 20], -360, 360)

        shape_color = prng.pick(shape_colors, "transparent")
        eyes = prng.pick(eyes_variants, "variant1")
        mouth = prng.pick(mouth_variants, "variant1")
        eyes_color = prng.pick(eyes_colors, "000000")
        mouth_color = prng.pick(mouth_colors, "000000")

        picks = {
            "shapeOffsetX": prng.integer(min(shape_offset_x), max(shape_offset_x)),
            "shapeOffsetY": prng.integer(min(shape_offset_y), max(shape_offset_y)),
            "shapeRotation": prng.integer(min(shape_rotation), max(shape_rotation)),
            "faceOffsetX": prng.integer(min(face_offset_x), max(face_offset_x)),
            "faceOffsetY": prng.integer(min(face_offset_y), max(face_offset_y)),
            "faceRotation": prng.integer(min(face_rotation), max(face_rotation)),
        }

        face = (
            EYES[eyes].format(color=eyes_color)
            + MOUTHS[mouth].format(color=mouth_color)
        )
        body = (
            f'<g transform="translate({picks["shapeOffsetX"]} {picks["shapeOffsetY"]}) '
            f'rotate({picks["shapeRotation"]} 50 50)">'
            f'{SHAPE.format(color=shape_color)}'
            f'<g transform="translate({picks["faceOffsetX"]} {picks["faceOffsetY"]}) '
            f'rotate({picks["faceRotation"]} 50 50)">{face}</g>'
            '</g>'
        )

        extra = {
            "shapeColor": shape_color,
            "eyes": eyes,
            "eyesColor": eyes_color,
            "mouth": mouth,
            "mouthColor": mouth_color,
            **picks,
        }
        return body, extra


__all__ = ["ThumbsStyle", "EYES", "MOUTHS"]
