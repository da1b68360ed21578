"""Bunk v1: helpers for storing binary fields in serialized documents.

Settings are fixed to the LOCKED "serde" profile (3 syllables per word, no
checksum, no decoration) so stored strings stay decodable regardless of
what the caller uses elsewhere.

    doc  = json.dumps({"key": os.urandom(16), "name": "vault"}, cls=BunkJSONEncoder)
    back = decode_fields(json.loads(doc), ["key"])
"""

import json
from collections.abc import Iterable, Mapping
from typing import Any

from .api import decode, encode
from .settings import Settings

SERDE_SETTINGS = Settings.from_profile("serde")


def serialize(data: bytes) -> str:
    return encode(data, SERDE_SETTINGS)


def deserialize(text: str) -> bytes:
    return decode(text, SERDE_SETTINGS)


class BunkJSONEncoder(json.JSONEncoder):
    """JSON encoder that writes ``bytes``/``bytearray`` values as Bunk text."""

    def default(self, o: Any) -> Any:
        if isinstance(o, (bytes, bytearray, memoryview)):
            return serialize(bytes(o))
        return super().default(o)


def decode_fields(obj: Mapping[str, Any], keys: Iterable[str]) -> dict[str, Any]:
    """Return a copy of *obj* with each of *keys* decoded back to bytes.

    Keys missing from *obj* are ignored.
    """
    out = dict(obj)
    for key in keys:
        if key in out:
            out[key] = deserialize(out[key])
    return out
