"""
AvatarAPI - Seed Resolution
===========================

Folds the path into a single seed: /user/john/doe -> "user/john/doe".
"""

from typing import Sequence

SEPARATOR = "/"


def resolve_seed(head: str, tail: Sequence[str] = ()) -> str:
    """
    Join the first path segment with the remaining ones.

    Segment text is kept exactly as given (no trimming, case folding or
    re-encoding), so different paths always give different seeds.
    """
    if not tail:
        return head
    return head + SEPARATOR + SEPARATOR.join(tail)


def split_tail(wildcard: str) -> list:
    """Split a wildcard path into segments; an empty wildcard has none."""
    if not wildcard:
        return []
    return wildcard.split(SEPARATOR)


__all__ = ["resolve_seed", "split_tail"]
