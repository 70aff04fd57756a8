"""
AvatarAPI - Seeded PRNG
=======================

Deterministic 32-bit xorshift generator. The same seed string always
yields the same sequence, which is what makes avatars reproducible.
"""

import math
from typing import Any, List, Optional, Sequence

INT32_MIN = -2147483648
INT32_MAX = 2147483647


def _int32(value: int) -> int:
    """Wrap an arbitrary int into the signed 32-bit range."""
    return ((value + 2 ** 31) % 2 ** 32) - 2 ** 31


def xorshift(value: int) -> int:
    value = _int32(value ^ _int32(value << 13))
    value = _int32(value ^ (value >> 17))
    value = _int32(value ^ _int32(value << 5))
    return value


def hash_seed(seed: str) -> int:
    """Fold a seed string into a signed 32-bit state."""
    state = 0
    for char in seed:
        state = _int32((state << 5) - state + ord(char))
        state = xorshift(state)
    return state


class Prng:
    """Seeded pseudo random number generator."""

    def __init__(self, seed: str = "") -> None:
        self.seed = seed
        # Zero is a fixed point of xorshift
        self._value = hash_seed(seed) or 1

    def next(self) -> int:
        self._value = xorshift(self._value)
        return self._value

    def integer(self, minimum: int, maximum: int) -> int:
        """Return an int in [minimum, maximum]."""
        fraction = (self.next() - INT32_MIN) / (INT32_MAX - INT32_MIN)
        return min(math.floor(fraction * (maximum + 1 - minimum) + minimum), maximum)

    def bool(self, likelihood: int = 50) -> bool:
        return self.integer(1, 100) <= likelihood

    def pick(self, items: Sequence[Any], fallback: Optional[Any] = None) -> Any:
        if not items:
            self.next()
            return fallback
        return items[self.integer(0, len(items) - 1)]

    def shuffle(self, items: Sequence[Any]) -> List[Any]:
        result = list(items)
        for i in range(len(result) - 1, 0, -1):
            j = self.integer(0, i)
            result[i], result[j] = result[j], result[i]
        return result


__all__ = ["Prng", "hash_seed", "xorshift"]
