"""Text folding and folded-form matching components.

This package provides the deterministic normalization transform and the
comparison helpers built on top of it.
"""

from .matching import filter_matches, normalized_contains, normalized_equals
from .normalizer import (
    COMBINING_MARKS_FIRST,
    COMBINING_MARKS_LAST,
    CYRILLIC_LOOKALIKES,
    TextNormalizer,
    decompose,
    fold_case,
    normalize,
    replace_cyrillic_lookalikes,
    strip_combining_marks,
)

__all__ = [
    "normalize",
    "TextNormalizer",
    "fold_case",
    "decompose",
    "strip_combining_marks",
    "replace_cyrillic_lookalikes",
    "normalized_equals",
    "normalized_contains",
    "filter_matches",
    "COMBINING_MARKS_FIRST",
    "COMBINING_MARKS_LAST",
    "CYRILLIC_LOOKALIKES",
]
