"""Search-oriented text folding.

Responsibilities:
- Fold free-form text into one comparable form for lookup and matching.
- Keep every step deterministic and locale-independent.

The folded form is NFD with the Combining Diacritical Marks block removed and
two Cyrillic look-alikes mapped to Latin. It is not re-composed to NFC.
"""

from __future__ import annotations

import re
import unicodedata


COMBINING_MARKS_FIRST = "\u0300"
COMBINING_MARKS_LAST = "\u036f"

# Only these two pairs are mapped; other Cyrillic homoglyphs stay untouched.
CYRILLIC_LOOKALIKES: dict[str, str] = {
    "а": "a",  # CYRILLIC SMALL LETTER A
    "л": "l",  # CYRILLIC SMALL LETTER EL
}

_COMBINING_MARKS_RE = re.compile(f"[{COMBINING_MARKS_FIRST}-{COMBINING_MARKS_LAST}]")
_LOOKALIKE_TABLE = str.maketrans(CYRILLIC_LOOKALIKES)


def fold_case(text: str) -> str:
    """Lowercase text with the default, non-locale-aware mapping."""

    return text.lower()


def decompose(text: str) -> str:
    """Return the canonical decomposition (NFD) of text."""

    return unicodedata.normalize("NFD", text)


def strip_combining_marks(text: str) -> str:
    """Remove code points in U+0300..U+036F, keeping marks from other blocks."""

    return _COMBINING_MARKS_RE.sub("", text)


def replace_cyrillic_lookalikes(text: str) -> str:
    """Map Cyrillic `а` and `л` to Latin `a` and `l`."""

    return text.translate(_LOOKALIKE_TABLE)


def normalize(text: str) -> str:
    """Fold text into its case-, accent- and look-alike-insensitive form.

    Args:
        text: Any Python string. Lone surrogates pass through unchanged.

    Returns:
        Lowercased, NFD-decomposed text without U+0300..U+036F marks, with
        Cyrillic `а`/`л` replaced by Latin `a`/`l`.

    Raises:
        TypeError: If `text` is not a `str`.
    """

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    folded = fold_case(text)
    folded = decompose(folded)
    folded = strip_combining_marks(folded)
    return replace_cyrillic_lookalikes(folded)


class TextNormalizer:
    """Fold text into the canonical form used for search comparisons."""

    def normalize(self, text: str) -> str:
        """Return the folded form of `text`."""

        return normalize(text)
