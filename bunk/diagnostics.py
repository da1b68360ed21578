"""Bunk v1: error types, decode failure codes and the decode result type."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureCode(str, Enum):
    """Reason a decode attempt did not produce a payload."""

    OK                = "ok"
    INVALID_INPUT     = "invalid_input"      # letters that form no syllable
    CHECKSUM_MISMATCH = "checksum_mismatch"  # trailing checksum disagrees
    CONFIG_ERROR      = "config_error"       # bad settings / too short for checksum


# ── exceptions ────────────────────────────────────────────────────────────────

class BunkError(ValueError):
    """Base class for every error raised by the codec."""

    code: FailureCode = FailureCode.INVALID_INPUT
    syllables: int = 0   # syllables parsed before the failure, if known


class InvalidInput(BunkError):
    """A word's remaining letters do not start with any syllable."""

    code = FailureCode.INVALID_INPUT

    def __init__(self, word: str, offset: int) -> None:
        self.word = word
        self.offset = offset
        super().__init__(
            f"Unrecognized syllable in {word!r} at letter {offset}"
        )


class ChecksumMismatch(BunkError):
    """The recomputed checksum differs from the one carried in the text."""

    code = FailureCode.CHECKSUM_MISMATCH

    def __init__(self, expected: bytes, claimed: bytes) -> None:
        self.expected = expected
        self.claimed = claimed
        super().__init__(
            f"Data integrity check failed: expected {expected.hex()}, "
            f"got {claimed.hex()}"
        )


class ConfigError(BunkError):
    """Settings are invalid, or the text is too short for the checksum."""

    code = FailureCode.CONFIG_ERROR


# ── decode result ─────────────────────────────────────────────────────────────

@dataclass
class DecodeResult:
    """Full decode outcome returned by :func:`bunk.try_decode`.

    On success  : ``success=True``,  ``data`` is the recovered payload.
    On failure  : ``success=False``, ``failure`` explains why, ``data`` is None.
    """

    success:           bool
    data:              Optional[bytes]       = None
    failure:           Optional[FailureCode] = None
    message:           str                   = ""

    # Diagnostics (0 if the decode failed before reaching that stage)
    words:             int                   = 0   # words after stripping decoration
    syllables_decoded: int                   = 0   # payload + checksum syllables
    checksum_len:      int                   = 0   # trailing checksum bytes checked

    def summary(self) -> str:
        if self.success:
            return (
                f"[OK] {len(self.data)}B decoded  "
                f"words={self.words} syl={self.syllables_decoded} "
                f"checksum={self.checksum_len}B"
            )
        return (
            f"[FAIL:{self.failure.value}]  "
            f"words={self.words} syl={self.syllables_decoded}  {self.message}"
        )

    def __repr__(self) -> str:
        return f"DecodeResult({self.summary()})"
