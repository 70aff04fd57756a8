"""
AvatarAPI - Option Coercion
===========================

Typed readers for render options. Query strings deliver everything as
text, so each reader accepts both native values and their string form
and raises InvalidOptionError for anything else.
"""

import re
from typing import Any, List, Mapping, Optional, Sequence

from src.core.exceptions import InvalidOptionError


COLOR_PATTERN = re.compile(r"^(transparent|[a-fA-F0-9]{6})$")
INT_PATTERN = re.compile(r"^[+-]?\d+$")

TRUE_VALUES = ("true", "1")
FALSE_VALUES = ("false", "0")


def as_list(value: Any) -> List[Any]:
    """Wrap scalars in a list; lists are copied."""
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def _split_csv(values: Sequence[Any]) -> List[Any]:
    """Expand comma-separated strings (``a,b``) into separate items."""
    result: List[Any] = []
    for item in values:
        if isinstance(item, str):
            result.extend(part for part in item.split(",") if part)
        else:
            result.append(item)
    return result


def read_bool(options: Mapping[str, Any], name: str, default: bool) -> bool:
    if name not in options:
        return default

    value = options[name]
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False

    raise InvalidOptionError("Expected a boolean", option=name, value=value)


def _to_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise InvalidOptionError("Expected an integer", option=name, value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and INT_PATTERN.match(value.strip()):
        return int(value.strip())
    raise InvalidOptionError("Expected an integer", option=name, value=value)


def _check_range(name: str, number: int, minimum: Optional[int], maximum: Optional[int]) -> int:
    if (minimum is not None and number < minimum) or (maximum is not None and number > maximum):
        raise InvalidOptionError(
            "Value out of range", option=name, value=number, min=minimum, max=maximum
        )
    return number


def read_int(
    options: Mapping[str, Any],
    name: str,
    default: Optional[int],
    minimum: Optional[int] = None,
    maximum: Optional[int] = None,
) -> Optional[int]:
    if name not in options:
        return default

    value = options[name]
    if isinstance(value, (list, tuple)):
        raise InvalidOptionError("Expected a single integer", option=name, value=value)

    return _check_range(name, _to_int(name, value), minimum, maximum)


def read_int_range(
    options: Mapping[str, Any],
    name: str,
    default: Sequence[int],
    minimum: int,
    maximum: int,
) -> List[int]:
    """Read a ``[low, high]`` style range; a single value pins both ends."""
    if name not in options:
        return list(default)

    values = _split_csv(as_list(options[name]))
    if not values or len(values) > 2:
        raise InvalidOptionError("Expected one or two integers", option=name, value=options[name])

    return [_check_range(name, _to_int(name, item), minimum, maximum) for item in values]


def read_colors(options: Mapping[str, Any], name: str, default: Sequence[str]) -> List[str]:
    if name not in options:
        return list(default)

    colors = []
    for item in _split_csv(as_list(options[name])):
        if not isinstance(item, str) or not COLOR_PATTERN.match(item):
            raise InvalidOptionError("Expected a hex color", option=name, value=item)
        colors.append(item.lower())
    return colors


def read_choices(
    options: Mapping[str, Any],
    name: str,
    allowed: Sequence[str],
    default: Optional[Sequence[str]] = None,
) -> List[str]:
    if name not in options:
        return list(allowed if default is None else default)

    choices = []
    for item in _split_csv(as_list(options[name])):
        if item not in allowed:
            raise InvalidOptionError("Unknown variant", option=name, value=item)
        choices.append(item)
    return choices


__all__ = [
    "as_list",
    "read_bool",
    "read_int",
    "read_int_range",
    "read_colors",
    "read_choices",
]
