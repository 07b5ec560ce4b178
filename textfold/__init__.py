"""Top-level package for textfold.

textfold folds free-form text into a single comparable form for search: it
lowercases, decomposes to NFD, strips the Combining Diacritical Marks block and
maps the Cyrillic look-alikes `а`/`л` to Latin `a`/`l`. The main entry point is
`normalize`.
"""

from .text import (
    TextNormalizer,
    filter_matches,
    normalize,
    normalized_contains,
    normalized_equals,
)

__all__ = [
    "normalize",
    "TextNormalizer",
    "normalized_equals",
    "normalized_contains",
    "filter_matches",
    "__version__",
]

__version__ = "0.1.0"
