"""Bunk v1: integrity checksum.

FNV-1a (32-bit) over the payload, serialized little-endian and truncated to
the configured length. Layout of the stream handed to the mixer:

    payload || fnv1a(payload)[:length]

The checksum guards against transcription errors, not forgery.
"""

from .diagnostics import ChecksumMismatch, ConfigError
from .profiles import FNV_OFFSET_BASIS, FNV_PRIME, FNV_MASK, MAX_CHECKSUM_LEN


class Fnv1a:
    """Incremental FNV-1a hasher.

    >>> h = Fnv1a()
    >>> h.update(b"a")
    >>> hex(h.value)
    '0xe40c292c'
    """

    __slots__ = ("value",)

    def __init__(self, value: int = FNV_OFFSET_BASIS) -> None:
        self.value = value

    def update(self, data: bytes) -> None:
        h = self.value
        for byte in data:
            h = ((h ^ byte) * FNV_PRIME) & FNV_MASK
        self.value = h

    def digest(self) -> bytes:
        return self.value.to_bytes(4, "little")

    def copy(self) -> "Fnv1a":
        return Fnv1a(self.value)


def _check_length(length: int) -> None:
    if not 0 <= length <= MAX_CHECKSUM_LEN:
        raise ConfigError(f"checksum length must be 0-{MAX_CHECKSUM_LEN}, got {length}")


def compute(payload: bytes, length: int) -> bytes:
    """Return the first *length* bytes of FNV-1a(payload)."""
    _check_length(length)
    h = Fnv1a()
    h.update(payload)
    return h.digest()[:length]


def append_checksum(payload: bytes, length: int) -> bytes:
    """Return ``payload || compute(payload, length)``."""
    return bytes(payload) + compute(payload, length)


def verify_checksum(stream: bytes, length: int) -> bytes:
    """Verify and strip the trailing checksum of an unmixed *stream*.

    Returns:
        The payload (stream without its last *length* bytes).

    Raises:
        ConfigError       if the stream is shorter than *length*.
        ChecksumMismatch  if the recomputed checksum differs.
    """
    _check_length(length)
    if len(stream) < length:
        raise ConfigError(
            f"Encoded data too short: {len(stream)} byte(s) cannot hold "
            f"a {length}-byte checksum"
        )
    if length == 0:
        return bytes(stream)

    payload  = bytes(stream[:-length])
    claimed  = bytes(stream[-length:])
    expected = compute(payload, length)

    if claimed != expected:
        raise ChecksumMismatch(expected, claimed)

    return payload
