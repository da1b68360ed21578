"""Bunk v1: entropy mixer.

Raises the *apparent* entropy of a byte stream so that repetitive input
(e.g. ``[0, 0, 0, 0]``) does not encode to repetitive syllables. Each byte
is XORed with ``ENTROPY[position & 0xFF]``:

  - content-independent: the mask depends on the position only
  - self-inverse: mixing twice at the same position restores the byte
  - periodic: the mask repeats every 256 positions

This has no bearing on security or correctness; it only makes the output
look nicer.
"""

import numpy as np
from numpy.typing import NDArray

from .lexicon import ENTROPY

_MASK: NDArray[np.uint8] = np.array(ENTROPY, dtype=np.uint8)


def mix_byte(byte: int, position: int) -> int:
    """Mix (or unmix) a single byte at stream *position*."""
    if not 0 <= byte <= 0xFF:
        raise ValueError(f"byte value out of range: {byte}")
    if position < 0:
        raise ValueError(f"position must be non-negative, got {position}")
    return byte ^ ENTROPY[position & 0xFF]


def mix(data: bytes, offset: int = 0) -> bytes:
    """Mix (or unmix) a byte stream whose first byte sits at *offset*.

    Returns a new bytes object of the same length.
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    if not data:
        return b""
    arr  = np.frombuffer(bytes(data), dtype=np.uint8)
    idx  = (np.arange(offset, offset + len(arr), dtype=np.int64) & 0xFF)
    return (arr ^ _MASK[idx]).tobytes()


# XOR undoes itself
unmix = mix
