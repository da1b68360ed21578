"""Bunk v1: cosmetic decoration layer.

Encode side (applied last)
--------------------------
  - the first word is capitalized
  - each word break may carry a period or a comma in front of the space;
    the choice is made from the population count of an FNV-1a digest of
    all letters emitted so far, so the same words always get the same marks
  - the word after a period is capitalized
  - the text ends with a period

Decode side (applied first)
---------------------------
  - lowercase everything and delete every "," and "."

Marks only ever sit directly before a separator or at the very end, and are
never letters, so stripping them restores the plain text exactly.
"""

from .checksum import Fnv1a
from .profiles import (
    SEPARATOR, PERIOD, COMMA, DECORATION_MARKS,
    PERIOD_THRESHOLD, COMMA_THRESHOLD,
)

_STRIP_TABLE = str.maketrans("", "", DECORATION_MARKS)


def _break_mark(seed: Fnv1a) -> str:
    ones = bin(seed.value).count("1")
    if ones > PERIOD_THRESHOLD:
        return PERIOD
    if ones < COMMA_THRESHOLD:
        return COMMA
    return ""


def decorate(words: list[str]) -> str:
    """Join *words* into sentence-cased, punctuated text."""
    if not words:
        return ""

    seed = Fnv1a()
    parts: list[str] = []
    capitalize = True

    for i, word in enumerate(words):
        if i:
            mark = _break_mark(seed)
            parts.append(mark + SEPARATOR)
            capitalize = mark == PERIOD
        parts.append(word[0].upper() + word[1:] if capitalize else word)
        seed.update(word.encode("ascii"))

    parts.append(PERIOD)
    return "".join(parts)


def strip(text: str) -> str:
    """Undo :func:`decorate`: lowercase and drop commas and periods."""
    return text.lower().translate(_STRIP_TABLE)
