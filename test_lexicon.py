"""
test_lexicon.py - static syllable table and trie.

Tests:
  1. Syllable table: bijection, lengths, alphabet
  2. Trie arena: consistency with the table, terminal count, dumper output
  3. Trie traversal: step / terminal_byte / longest_match / has_continuation
"""
import pytest

from bunk.lexicon import ALPHABET, ENTROPY, SYLLABLES, TRIE, syllable_of
from bunk.lexicon.build import build_arena, render
from bunk.lexicon.trie import Trie
from bunk.lexicon.trie_data import ARENA


# ─────────────────────────────────────────────────────────────────────────────
# 1. Syllable table
# ─────────────────────────────────────────────────────────────────────────────

def test_table_is_bijective():
    assert len(SYLLABLES) == 256
    assert len(set(SYLLABLES)) == 256


def test_syllables_are_short_lowercase_words():
    for syl in SYLLABLES:
        assert 1 <= len(syl) <= 4, syl
        assert syl.isascii() and syl.isalpha() and syl.islower(), syl


def test_alphabet_excludes_separator_and_marks():
    assert " " not in ALPHABET
    assert "," not in ALPHABET
    assert "." not in ALPHABET
    assert ALPHABET <= set("abcdefghijklmnopqrstuvwxyz")


def test_syllable_of_total():
    for byte in range(256):
        assert syllable_of(byte) == SYLLABLES[byte]


@pytest.mark.parametrize("bad", [-1, 256, 1000])
def test_syllable_of_rejects_out_of_range(bad):
    with pytest.raises(ValueError):
        syllable_of(bad)


def test_entropy_is_permutation():
    assert sorted(ENTROPY) == list(range(256))


# ─────────────────────────────────────────────────────────────────────────────
# 2. Trie arena
# ─────────────────────────────────────────────────────────────────────────────

def test_exactly_256_terminals():
    assert TRIE.terminal_count() == 256


def test_every_syllable_reaches_its_terminal():
    for byte, syl in enumerate(SYLLABLES):
        node = TRIE.walk(syl)
        assert node is not None, syl
        assert TRIE.terminal_byte(node) == byte


def test_every_terminal_is_a_syllable():
    # Recover each node's prefix from the arena and compare with the table.
    prefix = {0: ""}
    for i, (value, letters, first) in enumerate(ARENA):
        for k, letter in enumerate(letters):
            prefix[first + k] = prefix[i] + letter
        if value >= 0:
            assert SYLLABLES[value] == prefix[i]
    assert len(prefix) == len(ARENA)


def test_dumper_reproduces_shipped_arena():
    assert build_arena(SYLLABLES) == ARENA


def test_dumper_render_lists_every_node():
    source = render(ARENA, SYLLABLES)
    assert source.startswith('"""Bunk v1 precomputed syllable trie.')
    assert source.count("),  # ") == len(ARENA)
    assert "# 0 (root)" in source


def test_dumper_rejects_duplicates():
    with pytest.raises(ValueError):
        build_arena(["ab", "ab"])


def test_small_arena_layout():
    arena = build_arena(["a", "ab", "b"])
    # root, a, b, ab
    assert arena == (
        (-1, "ab", 1),
        (0, "b", 3),
        (2, "", -1),
        (1, "", -1),
    )


def test_empty_arena_rejected():
    with pytest.raises(ValueError):
        Trie(())


# ─────────────────────────────────────────────────────────────────────────────
# 3. Traversal
# ─────────────────────────────────────────────────────────────────────────────

def test_root_is_not_terminal():
    assert TRIE.terminal_byte(TRIE.root()) is None


def test_step_unknown_letter():
    root = TRIE.root()
    assert TRIE.step(root, "z") is None
    assert TRIE.step(root, "1") is None
    assert TRIE.step(root, "") is None
    assert TRIE.step(root, "ab") is None


def test_step_and_terminal():
    node = TRIE.step(TRIE.root(), "o")
    assert TRIE.terminal_byte(node) == SYLLABLES.index("o")
    # "o" -> "ou" is a prefix of "ous"
    assert TRIE.has_continuation(node, "u")
    assert not TRIE.has_continuation(node, "q")


def test_leaf_has_no_continuation():
    node = TRIE.walk("tri")
    for letter in ALPHABET:
        assert not TRIE.has_continuation(node, letter)


def test_longest_match_prefers_longest():
    assert TRIE.longest_match("ous") == (SYLLABLES.index("ous"), 3)
    assert TRIE.longest_match("ou") == (SYLLABLES.index("ou"), 2)
    assert TRIE.longest_match("o") == (SYLLABLES.index("o"), 1)


def test_longest_match_falls_back_to_last_terminal():
    # "si" is a syllable and "siv" is only a prefix of "sive"
    assert TRIE.longest_match("siv") == (SYLLABLES.index("si"), 2)


def test_longest_match_stops_at_dead_end():
    assert TRIE.longest_match("trirori") == (SYLLABLES.index("tri"), 3)
    assert TRIE.longest_match("trirori", 3) == (SYLLABLES.index("ro"), 2)
    assert TRIE.longest_match("trirori", 5) == (SYLLABLES.index("ri"), 2)


@pytest.mark.parametrize("text", ["", "b", "v", "z", "4", "qz"])
def test_longest_match_none(text):
    assert TRIE.longest_match(text) is None
