"""Bunk v1: per-call codec settings.

The checksum length used to decode must match the one used to encode. The
word length limit and the decoration flag only shape the encoder's output;
the decoder accepts any word split and always strips decoration.
"""

from dataclasses import dataclass
from typing import Optional

from .diagnostics import ConfigError
from .profiles import (
    DEFAULT_CHECKSUM_LEN, DEFAULT_WORD_LEN, DEFAULT_DECORATE,
    MAX_CHECKSUM_LEN, PROFILES,
)


@dataclass(frozen=True)
class Settings:
    """Immutable encode/decode parameters.

    Attributes:
        checksum: Number of trailing checksum bytes, 0 to disable (max 4).
        word_len: Maximum syllables per word, or None for no limit.
        decorate: Add sentence casing, commas and periods to encoded text.
    """

    checksum: int           = DEFAULT_CHECKSUM_LEN
    word_len: Optional[int] = DEFAULT_WORD_LEN
    decorate: bool          = DEFAULT_DECORATE

    def __post_init__(self) -> None:
        if isinstance(self.checksum, bool) or not isinstance(self.checksum, int):
            raise ConfigError(f"checksum length must be an int, got {self.checksum!r}")
        if not 0 <= self.checksum <= MAX_CHECKSUM_LEN:
            raise ConfigError(
                f"checksum length must be 0-{MAX_CHECKSUM_LEN}, got {self.checksum}"
            )
        if self.word_len is not None:
            if isinstance(self.word_len, bool) or not isinstance(self.word_len, int):
                raise ConfigError(f"word_len must be an int or None, got {self.word_len!r}")
            if self.word_len < 1:
                raise ConfigError(f"word_len must be positive, got {self.word_len}")

    @classmethod
    def from_profile(cls, name: str) -> "Settings":
        """Build settings from a named entry in ``profiles.PROFILES``."""
        if name not in PROFILES:
            raise ConfigError(f"Unknown profile '{name}': choose from {list(PROFILES)}")
        return cls(**PROFILES[name])

    def __repr__(self) -> str:
        words = "unlimited" if self.word_len is None else self.word_len
        return (
            f"Settings(checksum={self.checksum}B word_len={words} "
            f"{'decorated' if self.decorate else 'plain'})"
        )


DEFAULT_SETTINGS = Settings()
