"""Bunk v1 syllable trie traversal.

The trie itself is static data (see trie_data.py). This module only walks
it. Nodes are plain integers indexing into the arena; nothing here holds a
reference to a node object, so the structure can be shared freely.

Two questions are asked of the trie:

  longest_match      decoder: which syllable is the longest prefix of the
                     remaining letters of a word?
  has_continuation   encoder: does the first letter of the next syllable
                     extend the previous one?  If so a word break is needed.

The second predicate is stricter than the minimum needed to avoid
ambiguity, which is what allows the decoder to be greedy with no lookahead.
"""

from typing import Optional

from .trie_data import ARENA

ROOT = 0
NO_VALUE = -1


class Trie:
    """Read-only view over a flat ``(value, letters, first_child)`` arena."""

    __slots__ = ("_arena",)

    def __init__(self, arena: tuple[tuple[int, str, int], ...]) -> None:
        if not arena:
            raise ValueError("trie arena is empty")
        self._arena = arena

    def __len__(self) -> int:
        return len(self._arena)

    # ── single-node queries ──────────────────────────────────────────────────

    def root(self) -> int:
        return ROOT

    def step(self, node: int, letter: str) -> Optional[int]:
        """Follow the transition for *letter* out of *node*, or None."""
        _, letters, first_child = self._arena[node]
        # find() on "" would match the empty string, so reject it explicitly
        if len(letter) != 1:
            return None
        k = letters.find(letter)
        if k < 0:
            return None
        return first_child + k

    def terminal_byte(self, node: int) -> Optional[int]:
        """Byte value whose syllable ends at *node*, or None."""
        value = self._arena[node][0]
        return None if value == NO_VALUE else value

    def has_continuation(self, node: int, letter: str) -> bool:
        return self.step(node, letter) is not None

    # ── multi-letter walks ───────────────────────────────────────────────────

    def walk(self, letters: str, node: int = ROOT) -> Optional[int]:
        """Follow every letter of *letters* from *node*; None if any step fails."""
        for letter in letters:
            node = self.step(node, letter)
            if node is None:
                return None
        return node

    def longest_match(self, text: str, start: int = 0) -> Optional[tuple[int, int]]:
        """Longest syllable that prefixes ``text[start:]``.

        Walks letter by letter from the root, remembering the last terminal
        passed, and stops at the first letter with no transition.

        Returns:
            ``(byte, consumed_letters)`` for the last terminal seen, or None
            if the walk never reached a terminal.
        """
        node = ROOT
        best: Optional[tuple[int, int]] = None
        pos = start
        end = len(text)

        while pos < end:
            node = self.step(node, text[pos])
            if node is None:
                break
            pos += 1
            value = self._arena[node][0]
            if value != NO_VALUE:
                best = (value, pos - start)

        return best

    # ── asset checks ─────────────────────────────────────────────────────────

    def terminal_count(self) -> int:
        return sum(1 for value, _, _ in self._arena if value != NO_VALUE)


TRIE = Trie(ARENA)
