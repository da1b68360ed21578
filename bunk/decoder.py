"""Bunk v1: greedy syllable decoder.

Input is undecorated text: lowercase letters and whitespace separators.
Each word is consumed left to right by repeated longest-prefix matches
against the trie. There is no backtracking; the encoder's word breaks
guarantee the greedy reading is the encoded one.

Any whitespace run counts as one separator. A word whose remaining letters
start no syllable aborts the whole decode with InvalidInput.
"""

from .diagnostics import InvalidInput
from .lexicon import TRIE


def split_words(text: str) -> list[str]:
    return text.split()


def decode_word(word: str, out: bytearray) -> int:
    """Append the bytes of one word to *out*; return how many were added."""
    pos = 0
    n = 0
    while pos < len(word):
        match = TRIE.longest_match(word, pos)
        if match is None:
            raise InvalidInput(word, pos)
        byte, consumed = match
        out.append(byte)
        pos += consumed
        n += 1
    return n


def decode_words(words: list[str]) -> bytes:
    """Decode words into the mixed byte stream."""
    out = bytearray()
    for word in words:
        decode_word(word, out)
    return bytes(out)


def decode_text(text: str) -> bytes:
    """Decode plain text (no decoration) into the mixed byte stream."""
    return decode_words(split_words(text))
