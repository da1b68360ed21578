"""Bunk: binary data as pronounceable, checksummed text.

Public API:
    encode(data, settings=DEFAULT_SETTINGS)     -> str
    decode(text, settings=DEFAULT_SETTINGS)     -> bytes
    try_decode(text, settings=DEFAULT_SETTINGS) -> DecodeResult
"""

from .api import decode, encode, try_decode
from .diagnostics import (
    BunkError, ChecksumMismatch, ConfigError, DecodeResult, FailureCode,
    InvalidInput,
)
from .settings import DEFAULT_SETTINGS, Settings

__version__ = "1.0.0"
__all__ = [
    "encode", "decode", "try_decode",
    "Settings", "DEFAULT_SETTINGS",
    "DecodeResult", "FailureCode",
    "BunkError", "InvalidInput", "ChecksumMismatch", "ConfigError",
]
