"""
test_layers.py - individual pipeline stages.

Tests:
  1. Entropy mixer
  2. FNV-1a checksum
  3. Decoration layer
  4. Settings and profiles
  5. Serde helpers
"""
import json
import re

import numpy as np
import pytest

from bunk import ChecksumMismatch, ConfigError, Settings, encode
from bunk.checksum import Fnv1a, append_checksum, compute, verify_checksum
from bunk.decorate import decorate, strip
from bunk.encoder import encode_words
from bunk.lexicon import ENTROPY
from bunk.mixer import mix, mix_byte, unmix
from bunk.profiles import PROFILES
from bunk.serde import BunkJSONEncoder, decode_fields, deserialize, serialize

RNG_SEED = 20240611


# ─────────────────────────────────────────────────────────────────────────────
# 1. Entropy mixer
# ─────────────────────────────────────────────────────────────────────────────

def test_mix_zeros_is_mask():
    assert mix(bytes(300)) == bytes(ENTROPY) + bytes(ENTROPY[:44])


def test_mix_is_self_inverse():
    rng  = np.random.default_rng(RNG_SEED)
    data = rng.integers(0, 256, size=1000, dtype=np.uint8).tobytes()
    assert unmix(mix(data)) == data
    assert mix(data) != data


def test_mix_matches_scalar():
    data = bytes(range(256)) * 2
    mixed = mix(data, offset=5)
    for i, byte in enumerate(data):
        assert mixed[i] == mix_byte(byte, i + 5)


def test_mix_byte_is_bijective_per_position():
    for position in (0, 1, 255, 256, 1000):
        assert sorted(mix_byte(b, position) for b in range(256)) == list(range(256))
        for b in range(256):
            assert mix_byte(mix_byte(b, position), position) == b


def test_mix_repeats_every_256():
    assert mix_byte(0x42, 3) == mix_byte(0x42, 259)


def test_mix_empty():
    assert mix(b"") == b""
    assert mix(bytearray()) == b""


@pytest.mark.parametrize("byte,position", [(-1, 0), (256, 0), (0, -1)])
def test_mix_byte_rejects_bad_arguments(byte, position):
    with pytest.raises(ValueError):
        mix_byte(byte, position)


def test_mix_rejects_negative_offset():
    with pytest.raises(ValueError):
        mix(b"\x00", offset=-1)


# ─────────────────────────────────────────────────────────────────────────────
# 2. Checksum
# ─────────────────────────────────────────────────────────────────────────────

def test_fnv1a_reference_values():
    assert compute(b"", 4) == (0x811C9DC5).to_bytes(4, "little")
    assert compute(b"a", 4) == (0xE40C292C).to_bytes(4, "little")
    assert compute(bytes(4), 4) == (0x4B95F515).to_bytes(4, "little")


def test_fnv1a_incremental():
    h = Fnv1a()
    h.update(b"after")
    snapshot = h.copy()
    h.update(b"sun")
    assert h.digest() == compute(b"aftersun", 4)
    assert snapshot.digest() == compute(b"after", 4)


@pytest.mark.parametrize("length", [0, 1, 2, 3, 4])
def test_checksum_truncates(length):
    assert compute(b"aftersun", length) == compute(b"aftersun", 4)[:length]


def test_append_then_verify():
    for length in range(5):
        stream = append_checksum(b"aftersun", length)
        assert len(stream) == 8 + length
        assert verify_checksum(stream, length) == b"aftersun"


def test_verify_mismatch():
    stream = bytearray(append_checksum(b"aftersun", 2))
    stream[0] ^= 0x01
    with pytest.raises(ChecksumMismatch) as info:
        verify_checksum(bytes(stream), 2)
    assert info.value.claimed == compute(b"aftersun", 2)
    assert info.value.expected == compute(bytes(stream[:-2]), 2)


def test_verify_too_short():
    with pytest.raises(ConfigError):
        verify_checksum(b"\x01", 2)


@pytest.mark.parametrize("length", [-1, 5])
def test_checksum_length_bounds(length):
    with pytest.raises(ConfigError):
        compute(b"", length)


# ─────────────────────────────────────────────────────────────────────────────
# 3. Decoration
# ─────────────────────────────────────────────────────────────────────────────

_DECORATED = re.compile(r"^[A-Za-z]+(?:[.,]? [A-Za-z]+)*\.$")


def _random_words(rng, n: int) -> list[str]:
    data = rng.integers(0, 256, size=n, dtype=np.uint8).tobytes()
    return encode_words(mix(data), 3)


def test_decorate_empty():
    assert decorate([]) == ""


def test_decorate_single_word():
    assert decorate(["trirori"]) == "Trirori."


def test_decorate_shape():
    rng = np.random.default_rng(RNG_SEED)
    for n in (1, 5, 40, 200):
        words = _random_words(rng, n)
        text  = decorate(words)
        assert _DECORATED.match(text), text
        assert text[0].isupper()
        assert strip(text) == " ".join(words)


def test_capitals_only_start_sentences():
    rng  = np.random.default_rng(RNG_SEED)
    text = decorate(_random_words(rng, 500))
    for i, ch in enumerate(text):
        if ch.isupper():
            assert i == 0 or text[i - 2:i] == ". "
        if i >= 2 and text[i - 2:i] == ". ":
            assert ch.isupper()


def test_decoration_uses_both_marks():
    rng  = np.random.default_rng(RNG_SEED)
    text = decorate(_random_words(rng, 500))
    assert ", " in text
    assert ". " in text
    assert text.count(" ") > text.count(", ") + text.count(". ")


def test_decorate_is_deterministic():
    words = ["trirori", "mulry", "o", "us", "tive"]
    assert decorate(words) == decorate(list(words))


def test_strip_preserves_separators():
    assert strip("Trirori, mulry. O us.") == "trirori mulry o us"


def test_strip_leaves_other_characters():
    assert strip("Tri-ro!") == "tri-ro!"


# ─────────────────────────────────────────────────────────────────────────────
# 4. Settings
# ─────────────────────────────────────────────────────────────────────────────

def test_default_settings():
    s = Settings()
    assert (s.checksum, s.word_len, s.decorate) == (1, 3, False)


@pytest.mark.parametrize("kwargs", [
    {"checksum": -1},
    {"checksum": 5},
    {"checksum": True},
    {"checksum": 1.0},
    {"word_len": 0},
    {"word_len": -3},
    {"word_len": 2.5},
])
def test_invalid_settings(kwargs):
    with pytest.raises(ConfigError):
        Settings(**kwargs)


def test_settings_are_frozen():
    with pytest.raises(AttributeError):
        Settings().checksum = 3


@pytest.mark.parametrize("name", sorted(PROFILES))
def test_profiles_are_valid(name):
    s = Settings.from_profile(name)
    assert s == Settings(**PROFILES[name])


def test_unknown_profile():
    with pytest.raises(ConfigError):
        Settings.from_profile("nope")


def test_readable_profile_decorates():
    text = encode(b"aftersun", Settings.from_profile("readable"))
    assert text[0].isupper() and text.endswith(".")


# ─────────────────────────────────────────────────────────────────────────────
# 5. Serde
# ─────────────────────────────────────────────────────────────────────────────

def test_serialize_roundtrip():
    data = bytes(range(32))
    text = serialize(data)
    assert text == encode(data, Settings(checksum=0, word_len=3))
    assert deserialize(text) == data


def test_json_roundtrip():
    key = bytes(range(16))
    doc = json.dumps({"key": key, "name": "vault"}, cls=BunkJSONEncoder)
    raw = json.loads(doc)
    assert raw["name"] == "vault"
    assert isinstance(raw["key"], str)
    assert decode_fields(raw, ["key", "missing"]) == {"key": key, "name": "vault"}


def test_json_encoder_rejects_other_objects():
    with pytest.raises(TypeError):
        json.dumps({"x": object()}, cls=BunkJSONEncoder)
