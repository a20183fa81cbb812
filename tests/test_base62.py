from __future__ import annotations

import random

import pytest

from jwkthumb.base62 import (
    DEFAULT_CHARACTER_SET,
    INVERTED_CHARACTER_SET,
    Base62Codec,
    convert_base,
)
from jwkthumb.errors import InvalidCharacter
from jwkthumb.models import CharacterSet


@pytest.mark.parametrize(
    "data, default, inverted",
    [
        (b"", "", ""),
        (b"\x00", "0", "0"),
        (b"\x00\x01", "01", "01"),
        (b"\x00\x00\x00", "000", "000"),
        (b"\x01", "1", "1"),
        (b"\x0a", "A", "a"),
        (b"\xff", "47", "47"),
        (b"\x01\x00", "48", "48"),
        (b"\xff\xff", "H31", "h31"),
    ],
)
def test_reference_vectors(data, default, inverted):
    assert Base62Codec().encode(data) == default
    assert Base62Codec(CharacterSet.INVERTED).encode(data) == inverted
    assert Base62Codec().decode(default) == data
    assert Base62Codec(CharacterSet.INVERTED).decode(inverted) == data


def test_convert_base_long_division():
    assert convert_base([], 256, 62) == []
    assert convert_base([0], 256, 62) == [0]
    assert convert_base([1, 0], 256, 62) == [4, 8]
    assert convert_base([17, 3, 1], 62, 256) == [255, 255]


def test_convert_base_suppresses_leading_zero_quotients():
    # The bare conversion works on magnitudes only.
    assert convert_base([0, 1], 256, 62) == [1]
    assert convert_base([0, 0, 0], 256, 62) == [0]


def test_convert_base_does_not_mutate_source():
    source = [1, 2, 3]
    convert_base(source, 256, 62)
    assert source == [1, 2, 3]


@pytest.mark.parametrize("charset", list(CharacterSet))
def test_round_trip(charset):
    rng = random.Random(7638)
    codec = Base62Codec(charset)
    samples = [bytes(rng.randrange(256) for _ in range(rng.randrange(1, 80))) for _ in range(50)]
    samples += [b"\x00" * 32, b"\x00\x00\xff", b"\xff" * 32, bytes(range(256))]
    for data in samples:
        assert codec.decode(codec.encode(data)) == data


def test_alphabets_differ_only_in_case():
    rng = random.Random(62)
    default = Base62Codec(CharacterSet.DEFAULT)
    inverted = Base62Codec(CharacterSet.INVERTED)
    for _ in range(20):
        data = bytes(rng.randrange(256) for _ in range(32))
        assert default.encode(data).swapcase() == inverted.encode(data)


def test_alphabets():
    assert Base62Codec().alphabet == DEFAULT_CHARACTER_SET
    assert Base62Codec("inverted").alphabet == INVERTED_CHARACTER_SET
    assert len(set(DEFAULT_CHARACTER_SET)) == 62
    assert sorted(DEFAULT_CHARACTER_SET) == sorted(INVERTED_CHARACTER_SET)


def test_output_uses_only_alphabet_characters():
    encoded = Base62Codec().encode(bytes(range(1, 200)))
    assert set(encoded) <= set(DEFAULT_CHARACTER_SET)


def test_decode_rejects_unknown_character():
    with pytest.raises(InvalidCharacter) as exc_info:
        Base62Codec().decode("ab-c")
    assert exc_info.value.character == "-"
    assert exc_info.value.position == 2


def test_decode_two_digits():
    assert Base62Codec().decode("zz") == bytes([15, 3])


def test_text_helpers_require_explicit_encoding():
    codec = Base62Codec()
    encoded = codec.encode_text("héllo", "utf-8")
    assert encoded == codec.encode("héllo".encode("utf-8"))
    assert codec.decode_text(encoded, "utf-8") == "héllo"
    assert codec.encode_text("héllo", "latin-1") != encoded


def test_unknown_charset_is_rejected():
    with pytest.raises(ValueError):
        Base62Codec("reversed")
