"""Folded-form comparison helpers for search and filtering.

Each helper folds both sides with a `TextNormalizer`; callers may inject
their own instance, otherwise the default folding is used.
"""

from __future__ import annotations

from collections.abc import Iterable

from .normalizer import TextNormalizer

_DEFAULT_NORMALIZER = TextNormalizer()


def normalized_equals(
    left: str, right: str, normalizer: TextNormalizer | None = None
) -> bool:
    """Return whether both values fold to the same text."""

    fold = (normalizer or _DEFAULT_NORMALIZER).normalize
    return fold(left) == fold(right)


def normalized_contains(
    haystack: str, needle: str, normalizer: TextNormalizer | None = None
) -> bool:
    """Return whether the folded needle occurs in the folded haystack.

    An empty needle matches every haystack.
    """

    fold = (normalizer or _DEFAULT_NORMALIZER).normalize
    return fold(needle) in fold(haystack)


def filter_matches(
    query: str,
    candidates: Iterable[str],
    normalizer: TextNormalizer | None = None,
) -> list[str]:
    """Return original candidates whose folded form contains the folded query.

    Input order and duplicates are preserved.
    """

    fold = (normalizer or _DEFAULT_NORMALIZER).normalize
    folded_query = fold(query)
    return [candidate for candidate in candidates if folded_query in fold(candidate)]
