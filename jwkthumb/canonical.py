from __future__ import annotations

from typing import Dict

from .errors import InvalidInput
from .jose_utils import b64url_encode, dumps_canonical
from .models import ECKey, KeyDescriptor, OctetKey, RSAKey


def _tag(name: str, value: str) -> str:
    if not value:
        raise InvalidInput(f"'{name}' must not be empty")
    if not value.isascii():
        raise InvalidInput(f"'{name}' must be an ASCII tag, got {value!r}")
    return value


def _material(name: str, value: bytes) -> str:
    if not value:
        raise InvalidInput(f"'{name}' must not be empty key material")
    return b64url_encode(value)


def required_members(key: KeyDescriptor) -> Dict[str, str]:
    """
    Return the RFC 7638 required members of a key, binary values base64url encoded.

    EC: crv, kty, x, y
    RSA: e, kty, n
    oct: k, kty
    """
    if isinstance(key, ECKey):
        return {
            "crv": _tag("crv", key.crv),
            "kty": _tag("kty", key.kty),
            "x": _material("x", key.x),
            "y": _material("y", key.y),
        }
    if isinstance(key, RSAKey):
        return {
            "e": _material("e", key.e),
            "kty": _tag("kty", key.kty),
            "n": _material("n", key.n),
        }
    if isinstance(key, OctetKey):
        return {
            "k": _material("k", key.k),
            "kty": _tag("kty", key.kty),
        }
    raise InvalidInput(f"Unsupported key descriptor: {type(key).__name__}")


def canonical_json(key: KeyDescriptor) -> str:
    """
    Construct a JSON object containing only the required members of the key,
    ordered lexicographically by code point, with no whitespace.
    See https://tools.ietf.org/html/rfc7638#section-3.
    """
    return dumps_canonical(required_members(key))


def canonical_bytes(key: KeyDescriptor) -> bytes:
    return canonical_json(key).encode("utf-8")
