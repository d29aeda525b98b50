"""
Text Comparison Helpers.

Every case-insensitive comparison in the package goes through these
helpers so that filtering and search fold text the same way.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Tuple

from pyuca import Collator


def fold(value: Optional[str]) -> str:
    """Case-fold a value for comparison; None folds to ""."""
    if not value:
        return ""
    return value.casefold()


def equals_folded(left: Optional[str], right: Optional[str]) -> bool:
    """Case-insensitive equality. Empty values never match."""
    if not left or not right:
        return False
    return fold(left) == fold(right)


def contains_folded(haystack: Optional[str], needle: Optional[str]) -> bool:
    """Case-insensitive substring test. An empty haystack never matches."""
    if not haystack or needle is None:
        return False
    return fold(needle) in fold(haystack)


def contains_any_folded(haystack: Optional[str], needles) -> Optional[str]:
    """Return the first needle found in haystack, or None."""
    if not haystack:
        return None
    folded = fold(haystack)
    for needle in needles:
        if fold(needle) in folded:
            return needle
    return None


@lru_cache(maxsize=None)
def _collator() -> Collator:
    return Collator()


def collation_key(value: Optional[str]) -> Tuple[int, ...]:
    """
    Sort key following the Unicode Collation Algorithm.

    Base letters decide first, then accents, then case with lowercase
    ahead of uppercase. Punctuation sorts before digits and letters in
    collation order rather than by code point.

    Args:
        value: Text to build a key for

    Returns:
        Tuple usable as a ``sorted`` key
    """
    return _collator().sort_key(value or "")
