"""Bunk v1: all compile-time constants, keyed in one place.

Change a value here and it propagates everywhere. Values marked LOCKED are
part of the wire format; changing them breaks compatibility with text
encoded by earlier builds.
"""

FORMAT_VERSION = 1

# ── Checksum (FNV-1a, 32-bit) ─────────────────────────────────────────────────
# LOCKED for v1.
FNV_OFFSET_BASIS = 0x811C9DC5
FNV_PRIME        = 0x01000193
FNV_MASK         = 0xFFFFFFFF
MAX_CHECKSUM_LEN = 4          # bytes available from a 32-bit digest

# ── Wire format ───────────────────────────────────────────────────────────────
SEPARATOR = " "

# Decoration marks. None of these may ever be a syllable letter.
PERIOD           = "."
COMMA            = ","
DECORATION_MARKS = PERIOD + COMMA

# A word break becomes ". " when the popcount of the running FNV-1a digest is
# above PERIOD_THRESHOLD and ", " when it is below COMMA_THRESHOLD. Popcount of
# a 32-bit digest averages 16, so roughly one break in eight gets a period and
# one in seven a comma.
PERIOD_THRESHOLD = 19
COMMA_THRESHOLD  = 14

# ── Defaults ──────────────────────────────────────────────────────────────────
DEFAULT_CHECKSUM_LEN = 1
DEFAULT_WORD_LEN     = 3      # syllables per word; None means unlimited
DEFAULT_DECORATE     = False

# ── Named settings profiles ───────────────────────────────────────────────────
# "serde" is LOCKED: strings embedded in stored documents depend on it.
PROFILES: dict[str, dict] = {
    "default": {
        "checksum": DEFAULT_CHECKSUM_LEN,
        "word_len": DEFAULT_WORD_LEN,
        "decorate": DEFAULT_DECORATE,
    },
    # no integrity bytes; shortest output
    "plain": {
        "checksum": 0,
        "word_len": DEFAULT_WORD_LEN,
        "decorate": False,
    },
    # long keys typed by hand: 1 in 2^32 chance of missing a typo
    "strict": {
        "checksum": MAX_CHECKSUM_LEN,
        "word_len": DEFAULT_WORD_LEN,
        "decorate": False,
    },
    # sentence-like output for reading aloud
    "readable": {
        "checksum": 2,
        "word_len": 4,
        "decorate": True,
    },
    "serde": {
        "checksum": 0,
        "word_len": 3,
        "decorate": False,
    },
}
DEFAULT_PROFILE = "default"
