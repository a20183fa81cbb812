from __future__ import annotations

from typing import Dict

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

from .errors import InvalidInput
from .models import ECKey, KeyDescriptor, OctetKey, RSAKey, build_key

# cryptography curve name -> JWA "crv" value
_JWA_CURVES: Dict[str, str] = {
    "secp256r1": "P-256",
    "secp384r1": "P-384",
    "secp521r1": "P-521",
    "secp256k1": "secp256k1",
}


def _int_to_bytes(value: int, length: int | None = None) -> bytes:
    """Big-endian, minimal length unless a fixed `length` is given."""
    if length is None:
        length = max(1, (value.bit_length() + 7) // 8)
    return value.to_bytes(length, byteorder="big")


def descriptor_from_public_key(public_key) -> KeyDescriptor:
    """
    Build a key descriptor from a cryptography public key object.

    EC coordinates are left-padded to the curve's field size, as JWA requires.
    RSA exponent and modulus use the minimal big-endian encoding.
    """
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        crv = _JWA_CURVES.get(public_key.curve.name)
        if crv is None:
            raise InvalidInput(f"Unsupported EC curve: {public_key.curve.name}")
        size = (public_key.curve.key_size + 7) // 8
        numbers = public_key.public_numbers()
        return build_key(ECKey, crv=crv, x=_int_to_bytes(numbers.x, size), y=_int_to_bytes(numbers.y, size))

    if isinstance(public_key, rsa.RSAPublicKey):
        numbers = public_key.public_numbers()
        return build_key(RSAKey, e=_int_to_bytes(numbers.e), n=_int_to_bytes(numbers.n))

    raise InvalidInput(f"Unsupported public key type: {type(public_key).__name__}")


def descriptor_from_pem(data: bytes) -> KeyDescriptor:
    """Load a PEM-encoded public key (SubjectPublicKeyInfo or PKCS#1)."""
    try:
        public_key = serialization.load_pem_public_key(data)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise InvalidInput(f"Could not load PEM public key: {exc}") from exc
    return descriptor_from_public_key(public_key)


def octet_key(k: bytes) -> OctetKey:
    if not k:
        raise InvalidInput("'k' must not be empty key material")
    return build_key(OctetKey, k=bytes(k) if isinstance(k, (bytearray, memoryview)) else k)
