"""Bunk v1: high-level encode / decode API.

encode(data, settings)     -> str
decode(text, settings)     -> bytes          (raises BunkError subclasses)
try_decode(text, settings) -> DecodeResult   (never raises on bad input)

Full pipeline
=============

Encode
------
  data
    → payload || FNV-1a(payload)[:checksum]         (checksum.append_checksum)
    → XOR with position mask                         (mixer.mix)
    → syllables grouped into ambiguity-safe words    (encoder.encode_words)
    → [if decorate] casing + commas + periods        (decorate.decorate)
      [else]        words joined by single spaces

Decode
------
  text
    → lowercase, drop "," and "."                    (decorate.strip)
    → split on whitespace, greedy longest match      (decoder.decode_words)
    → XOR with position mask                         (mixer.unmix)
    → verify + strip trailing checksum               (checksum.verify_checksum)
    → payload
"""

import logging
from typing import Union

from .checksum import append_checksum, verify_checksum
from .decoder import decode_words, split_words
from .decorate import decorate, strip
from .diagnostics import BunkError, DecodeResult, FailureCode
from .encoder import encode_words
from .mixer import mix, unmix
from .profiles import SEPARATOR
from .settings import DEFAULT_SETTINGS, Settings

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]


# ── encode ────────────────────────────────────────────────────────────────────

def encode(data: BytesLike, settings: Settings = DEFAULT_SETTINGS) -> str:
    """Encode *data* as pronounceable text.

    Args:
        data:     Bytes to encode (any length, including empty).
        settings: Checksum length, word length limit and decoration.
                  The same checksum length must be used to decode.

    Returns:
        Lowercase words separated by single spaces, or sentence-like text
        if ``settings.decorate`` is set. Empty input with checksum disabled
        gives an empty string.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        data = bytes(data)

    stream = append_checksum(bytes(data), settings.checksum)
    mixed  = mix(stream)
    words  = encode_words(mixed, settings.word_len)

    logger.debug(
        "encoded %dB payload + %dB checksum as %d word(s)",
        len(data), settings.checksum, len(words),
    )

    if settings.decorate:
        return decorate(words)
    return SEPARATOR.join(words)


# ── decode ────────────────────────────────────────────────────────────────────

def decode(text: str, settings: Settings = DEFAULT_SETTINGS) -> bytes:
    """Decode text produced by :func:`encode`.

    Decoration is always stripped first, so decorated and plain text both
    decode. Only ``settings.checksum`` affects decoding.

    Raises:
        InvalidInput:     a word contains letters that form no syllable.
        ChecksumMismatch: the trailing checksum does not match the payload.
        ConfigError:      too few syllables to hold the checksum.
    """
    return _decode(text, settings)[0]


def try_decode(text: str, settings: Settings = DEFAULT_SETTINGS) -> DecodeResult:
    """Decode *text*, reporting failure in the result instead of raising.

    Returns:
        :class:`DecodeResult`; check ``.success`` before using ``.data``.
    """
    try:
        data, n_words, n_syl = _decode(text, settings)
    except BunkError as exc:
        logger.debug("decode failed: %s", exc)
        return DecodeResult(
            success=False,
            failure=exc.code,
            message=str(exc),
            words=len(split_words(strip(text))),
            syllables_decoded=exc.syllables,
        )

    return DecodeResult(
        success=True,
        data=data,
        failure=FailureCode.OK,
        words=n_words,
        syllables_decoded=n_syl,
        checksum_len=settings.checksum,
    )


def _decode(text: str, settings: Settings) -> tuple[bytes, int, int]:
    """Run the decode pipeline; returns (payload, n_words, n_syllables)."""
    if not isinstance(text, str):
        raise TypeError(f"text must be str, got {type(text).__name__}")

    words = split_words(strip(text))
    mixed = decode_words(words)

    try:
        payload = verify_checksum(unmix(mixed), settings.checksum)
    except BunkError as exc:
        exc.syllables = len(mixed)
        raise

    logger.debug(
        "decoded %d word(s), %d syllable(s) -> %dB payload",
        len(words), len(mixed), len(payload),
    )
    return payload, len(words), len(mixed)
