"""Bunk v1 syllable table and entropy mask.

Both tables are part of the versioned static asset. Changing either one
breaks compatibility with every string encoded by an earlier build, so
treat them as frozen for format version 1.

SYLLABLES[b] is the syllable carrying byte value ``b``. The reverse
direction (letters -> byte) is resolved by the trie, never by this table,
because one syllable may be a prefix of another.

ENTROPY is a permutation of 0..255. Byte ``i`` of an encoded stream is
XORed with ``ENTROPY[i & 0xFF]`` before its syllable is looked up.
"""

# fmt: off
SYLLABLES: tuple[str, ...] = (
    "a", "e", "i", "o", "u", "y", "ae", "ai",
    "au", "ea", "ei", "eu", "ia", "ie", "io", "oa",
    "oe", "oi", "ou", "ua", "ue", "ui", "ba", "be",
    "bi", "bo", "bu", "ca", "ce", "ci", "co", "cu",
    "da", "de", "di", "do", "du", "fa", "fe", "fi",
    "fo", "fu", "ga", "ge", "gi", "go", "gu", "la",
    "le", "li", "lo", "lu", "ma", "me", "mi", "mo",
    "mu", "na", "ne", "ni", "no", "nu", "pa", "pe",
    "pi", "po", "pu", "ra", "re", "mil", "fre", "ru",
    "sa", "se", "si", "so", "su", "ta", "te", "ti",
    "to", "tu", "va", "ve", "vi", "vo", "vu", "by",
    "cy", "dy", "fy", "ly", "my", "ny", "py", "mor",
    "sy", "ty", "al", "am", "an", "ar", "as", "at",
    "el", "em", "en", "er", "es", "et", "il", "im",
    "tri", "ir", "is", "it", "ol", "om", "mul", "or",
    "os", "ot", "ul", "um", "un", "ur", "us", "ut",
    "ous", "ex", "bar", "ber", "bil", "bon", "bus", "cal",
    "cen", "cor", "cum", "dan", "del", "dis", "dor", "dum",
    "fal", "fer", "fin", "for", "ful", "gar", "gen", "gil",
    "gon", "gus", "lam", "len", "lin", "lor", "lum", "mal",
    "men", "ri", "ry", "on", "nam", "nel", "nim", "nor",
    "num", "pan", "per", "pil", "pol", "pus", "ram", "ren",
    "ril", "ron", "rum", "sal", "sen", "sil", "sol", "sum",
    "tal", "ten", "til", "tor", "tum", "val", "ven", "vil",
    "vor", "vus", "bra", "bre", "bri", "bro", "cla", "cle",
    "cli", "clo", "cra", "cre", "cri", "cro", "dra", "dre",
    "dri", "dro", "fla", "fle", "fli", "flo", "fra", "ro",
    "fri", "fro", "gra", "gre", "gri", "gro", "pla", "ple",
    "pli", "plo", "pra", "pre", "pri", "pro", "sta", "ste",
    "sti", "sto", "tra", "tre", "in", "tro", "qua", "que",
    "qui", "quo", "pha", "phe", "phi", "pho", "tha", "the",
    "thi", "tho", "sive", "tive", "son", "ment", "tion", "sion",
)

ENTROPY: tuple[int, ...] = (
    0x70, 0xD7, 0xA1, 0x76, 0xB7, 0xB6, 0x61, 0xC5, 0xEF, 0x7E, 0x3A, 0xDE,
    0x41, 0x1B, 0x6B, 0x87, 0x64, 0xDB, 0xD2, 0x26, 0xCB, 0xE6, 0x5C, 0xB2,
    0x6A, 0xA3, 0x6E, 0x2F, 0x19, 0x22, 0xDD, 0xEE, 0x8E, 0xFA, 0x63, 0x58,
    0xE4, 0xBD, 0x9C, 0xD3, 0x83, 0x69, 0x34, 0xFB, 0x91, 0x95, 0xDA, 0x1E,
    0xC9, 0xEC, 0x50, 0x60, 0x00, 0xBE, 0xB0, 0xF5, 0x90, 0x0D, 0x0E, 0x10,
    0x3C, 0xB3, 0x85, 0x42, 0x40, 0x44, 0xD8, 0x3B, 0x7B, 0xFF, 0x68, 0x38,
    0xA9, 0xF1, 0x32, 0x2C, 0x0B, 0xE8, 0xD1, 0x73, 0x06, 0x07, 0x21, 0x6C,
    0xF7, 0x67, 0x45, 0x05, 0xC8, 0x30, 0xAA, 0x18, 0xAD, 0x8F, 0x37, 0xCD,
    0x93, 0x25, 0x96, 0x5B, 0x7F, 0xEA, 0x5F, 0xAB, 0x0C, 0x4A, 0x79, 0xC0,
    0x36, 0x23, 0xC3, 0x08, 0x29, 0x62, 0x14, 0x7A, 0xE5, 0xBF, 0x75, 0x20,
    0x8C, 0xA8, 0xFE, 0x8B, 0x89, 0x46, 0x24, 0xA7, 0xE9, 0x8A, 0x65, 0x16,
    0x54, 0xF6, 0x2E, 0x31, 0xFC, 0x99, 0x77, 0x33, 0x2D, 0xDC, 0x5A, 0x81,
    0xA2, 0x51, 0x92, 0x02, 0xC1, 0xEB, 0xE0, 0x28, 0x0F, 0xDF, 0x09, 0xD4,
    0x3E, 0xB1, 0x84, 0x1F, 0xD0, 0x1A, 0x48, 0xCF, 0xAF, 0xE2, 0xF2, 0x9A,
    0x9B, 0xF4, 0x03, 0x6F, 0x80, 0x6D, 0xB8, 0x7D, 0x55, 0x7C, 0xE7, 0xE3,
    0x5D, 0xE1, 0x56, 0xB9, 0x9E, 0xB5, 0x47, 0x88, 0x52, 0xFD, 0x72, 0xBB,
    0x94, 0x78, 0x4C, 0x17, 0xBC, 0xF0, 0xF8, 0x35, 0xA4, 0xD5, 0x4D, 0xB4,
    0xC2, 0x12, 0x15, 0x74, 0x8D, 0x13, 0x4B, 0x11, 0x43, 0x59, 0x71, 0x5E,
    0xC6, 0x4E, 0x9D, 0x04, 0x2B, 0xAE, 0x2A, 0xA6, 0x01, 0xF3, 0x53, 0xA5,
    0xD9, 0xCC, 0xC4, 0xC7, 0x66, 0x3F, 0xA0, 0x97, 0x82, 0x49, 0xBA, 0x1D,
    0x4F, 0x57, 0xCE, 0xAC, 0xD6, 0x3D, 0x9F, 0x1C, 0xCA, 0x86, 0x39, 0xF9,
    0x98, 0xED, 0x0A, 0x27,
)
# fmt: on

assert len(SYLLABLES) == 256, f"syllable table size mismatch: {len(SYLLABLES)}"
assert len(set(SYLLABLES)) == 256, "syllable table must be a bijection"
assert sorted(ENTROPY) == list(range(256)), "entropy mask must be a permutation"

# Every letter that appears in at least one syllable.
ALPHABET: frozenset[str] = frozenset("".join(SYLLABLES))


def syllable_of(byte: int) -> str:
    """Return the syllable assigned to *byte* (0-255)."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range: {byte}")
    return SYLLABLES[byte]
