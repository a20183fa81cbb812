from __future__ import annotations

from typing import Dict, List, Sequence

from .errors import InvalidCharacter
from .models import CharacterSet

DEFAULT_CHARACTER_SET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"
INVERTED_CHARACTER_SET = "0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"

_ALPHABETS: Dict[CharacterSet, str] = {
    CharacterSet.DEFAULT: DEFAULT_CHARACTER_SET,
    CharacterSet.INVERTED: INVERTED_CHARACTER_SET,
}


def convert_base(source: Sequence[int], source_base: int, target_base: int) -> List[int]:
    """
    Convert a big-endian digit sequence from one base to another.

    Each pass is one long division of the whole number by `target_base`:
    the remainder is the next output digit (least significant first, so it
    is prepended) and the quotient, stripped of leading zeros, is the input
    of the next pass. An empty source converts to an empty result.
    """
    result: List[int] = []
    digits = list(source)
    while digits:
        quotient: List[int] = []
        remainder = 0
        for digit in digits:
            accumulator = digit + remainder * source_base
            q = accumulator // target_base
            remainder = accumulator % target_base
            if quotient or q > 0:
                quotient.append(q)
        result.insert(0, remainder)
        digits = quotient
    return result


class Base62Codec:
    """
    Arbitrary-length bytes <-> base62 text.

    The input is read as a big-endian base-256 number. Leading zero bytes
    carry no magnitude, so each one is written as a leading zero character
    (and read back as a zero byte) to keep the byte length intact.
    """

    def __init__(self, charset: CharacterSet = CharacterSet.DEFAULT):
        self.charset = CharacterSet(charset)
        self._alphabet = _ALPHABETS[self.charset]
        self._index = {ch: i for i, ch in enumerate(self._alphabet)}

    @property
    def alphabet(self) -> str:
        return self._alphabet

    def encode(self, data: bytes) -> str:
        data = bytes(data)
        zeros = len(data) - len(data.lstrip(b"\x00"))
        converted = convert_base(data[zeros:], 256, 62)
        return self._alphabet[0] * zeros + "".join(self._alphabet[d] for d in converted)

    def decode(self, text: str) -> bytes:
        digits = []
        for pos, ch in enumerate(text):
            value = self._index.get(ch)
            if value is None:
                raise InvalidCharacter(ch, pos)
            digits.append(value)

        zeros = 0
        while zeros < len(digits) and digits[zeros] == 0:
            zeros += 1
        converted = convert_base(digits[zeros:], 62, 256)
        return bytes(zeros) + bytes(converted)

    def encode_text(self, value: str, encoding: str) -> str:
        """Encode a string after converting it to bytes with `encoding`."""
        return self.encode(value.encode(encoding))

    def decode_text(self, value: str, encoding: str) -> str:
        """Decode base62 text back to a string using `encoding`."""
        return self.decode(value).decode(encoding)

    def __repr__(self) -> str:
        return f"Base62Codec(charset={self.charset.value!r})"
