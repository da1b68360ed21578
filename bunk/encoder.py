"""Bunk v1: ambiguity-safe syllable encoder.

Turns an already mixed byte stream into words of syllables. A word break is
inserted before a syllable when either

  - the current word already holds ``word_len`` syllables, or
  - the first letter of the new syllable is a valid trie transition out of
    the previous syllable's node, i.e. a greedy decoder could read past the
    end of the previous syllable.

Breaks are decided here and nowhere else. They carry no data beyond "a
greedy decoder must stop here".
"""

from typing import Optional

from .lexicon import TRIE, syllable_of


def encode_syllables(mixed: bytes) -> list[str]:
    """Map every byte of *mixed* to its syllable, in order."""
    return [syllable_of(byte) for byte in mixed]


def needs_break(previous: str, syllable: str) -> bool:
    """True if *syllable* cannot directly follow *previous* inside a word."""
    node = TRIE.walk(previous)
    return node is not None and TRIE.has_continuation(node, syllable[0])


def encode_words(mixed: bytes, word_len: Optional[int] = None) -> list[str]:
    """Group the syllables of *mixed* into words.

    Args:
        mixed:    Mixed byte stream (payload || checksum, after mixing).
        word_len: Maximum syllables per word; None for no limit.

    Returns:
        Words in order, each a concatenation of syllables. Empty input gives
        an empty list.
    """
    if word_len is not None and word_len < 1:
        raise ValueError(f"word_len must be positive, got {word_len}")

    words: list[str] = []
    current: list[str] = []
    previous: Optional[str] = None

    for syllable in encode_syllables(mixed):
        if previous is not None and (
            (word_len is not None and len(current) >= word_len)
            or needs_break(previous, syllable)
        ):
            words.append("".join(current))
            current = []
        current.append(syllable)
        previous = syllable

    if current:
        words.append("".join(current))
    return words
