"""Symbol handling: grapheme segmentation and alphabet preparation.

A *symbol* is a user-perceived character (an extended grapheme cluster), so
``"é"`` or a flag emoji count as one symbol, never as several code points.
"""

from __future__ import annotations

import unicodedata

import regex

from weasel.exceptions import ConfigurationError

__all__ = ["graphemes", "grapheme_count", "build_alphabet"]

_GRAPHEME = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split *text* into grapheme clusters. No normalization is applied."""
    return _GRAPHEME.findall(text)


def grapheme_count(text: str) -> int:
    return len(graphemes(text))


def build_alphabet(raw: str) -> tuple[str, ...]:
    """Turn a raw symbol string into a deduplicated tuple of graphemes.

    The string is NFC-normalized first, then segmented into grapheme clusters;
    repeated clusters are dropped. The result is sorted so that seeded runs are
    reproducible regardless of string hash randomization; callers should not
    rely on the order otherwise.

    Raises:
        ConfigurationError: if no symbol is left (e.g. an empty string).
    """
    normalized = unicodedata.normalize("NFC", raw)
    symbols = tuple(sorted(set(graphemes(normalized))))
    if not symbols:
        raise ConfigurationError("alphabet is empty")
    return symbols
