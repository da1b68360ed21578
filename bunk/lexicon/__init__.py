"""Static Bunk v1 lexicon: syllable table, entropy mask and syllable trie."""

from .syllables import ALPHABET, ENTROPY, SYLLABLES, syllable_of
from .trie import TRIE, Trie

__all__ = ["ALPHABET", "ENTROPY", "SYLLABLES", "syllable_of", "TRIE", "Trie"]
