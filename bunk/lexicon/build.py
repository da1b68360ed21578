"""Offline generator for trie_data.py.

Not used by the codec at runtime. Run after changing the syllable table:

    python -m bunk.lexicon.build > bunk/lexicon/trie_data.py

Arena layout
------------
Every prefix of every syllable (plus the empty root prefix) becomes one
node. Nodes are numbered in (length, string) order, i.e. breadth-first with
siblings sorted. In that order the children of any node are contiguous, so
a node only needs to store its transition letters and the index of its
first child.
"""

import sys

from .syllables import SYLLABLES


def build_arena(syllables) -> tuple[tuple[int, str, int], ...]:
    """Build the ``(value, letters, first_child)`` arena for *syllables*."""
    values = {syl: byte for byte, syl in enumerate(syllables)}
    if len(values) != len(syllables):
        raise ValueError("syllables must be distinct")

    prefixes = {""}
    for syl in syllables:
        if not syl:
            raise ValueError("empty syllable")
        for n in range(1, len(syl) + 1):
            prefixes.add(syl[:n])

    order = sorted(prefixes, key=lambda p: (len(p), p))
    index = {p: i for i, p in enumerate(order)}

    letters = {p: "" for p in order}
    first_child = {p: -1 for p in order}
    for p in order[1:]:
        parent = p[:-1]
        if first_child[parent] < 0:
            first_child[parent] = index[p]
        letters[parent] += p[-1]

    return tuple(
        (values.get(p, -1), letters[p], first_child[p])
        for p in order
    )


def render(arena, syllables) -> str:
    """Render *arena* as the source of trie_data.py."""
    values = {byte: syl for byte, syl in enumerate(syllables)}
    # Recover each node's prefix for the trailing comment.
    prefix = [""] * len(arena)
    for i, (_, letters, first) in enumerate(arena):
        for k, letter in enumerate(letters):
            prefix[first + k] = prefix[i] + letter

    lines = [
        '"""Bunk v1 precomputed syllable trie.',
        "",
        "Generated by ``python -m bunk.lexicon.build`` from the syllable table.",
        "Do not edit by hand.",
        "",
        "Each entry is ``(value, letters, first_child)``:",
        "  value        byte whose syllable equals this node's prefix, or -1",
        "  letters      outgoing transitions, sorted",
        "  first_child  arena index of the child for letters[0], or -1 for a leaf;",
        "               the child for letters[k] is at first_child + k",
        '"""',
        "",
        "# fmt: off",
        "ARENA: tuple[tuple[int, str, int], ...] = (",
    ]
    for i, (value, letters, first) in enumerate(arena):
        assert value < 0 or values[value] == prefix[i]
        label = prefix[i] or "(root)"
        lines.append(f'    ({value}, "{letters}", {first}),  # {i} {label}')
    lines += [")", "# fmt: on", ""]
    return "\n".join(lines)


def main() -> int:
    sys.stdout.write(render(build_arena(SYLLABLES), SYLLABLES))
    return 0


if __name__ == "__main__":
    sys.exit(main())
