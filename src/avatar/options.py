"""
AvatarAPI - Options Normalizer
==============================

Turns raw query parameters into renderer options.
"""

from typing import Any, Dict, Mapping, Sequence

from src.core.constants import FORMAT_PARAM


def normalize_options(raw_query: Mapping[str, Sequence[str]]) -> Dict[str, Any]:
    """
    Build renderer options from a multi-valued query mapping.

    ``format`` is dropped. A key given once becomes a scalar, a key given
    several times stays a list (``?x=1`` and ``?x=1&x=2`` differ). Unknown
    keys are passed through untouched; the renderer validates them.
    """
    options: Dict[str, Any] = {}
    for key, values in raw_query.items():
        if key == FORMAT_PARAM:
            continue
        values = list(values)
        options[key] = values[0] if len(values) == 1 else values
    return options


__all__ = ["normalize_options"]
