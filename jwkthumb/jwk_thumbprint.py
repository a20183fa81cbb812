from __future__ import annotations

import hashlib
import logging
from typing import Optional, Union

from .base62 import Base62Codec
from .canonical import canonical_bytes
from .config import get_settings
from .errors import InvalidArgument, UnsupportedEncoding
from .jose_utils import b64url_encode
from .models import CharacterSet, ECKey, KeyDescriptor, OctetKey, RSAKey, ThumbprintEncoding, build_key

logger = logging.getLogger("jwkthumb.thumbprint")

SHA256_DIGEST_SIZE = 32


def _resolve_encoding(encoding: Union[ThumbprintEncoding, str, None]) -> ThumbprintEncoding:
    if encoding is None:
        return get_settings().default_encoding
    try:
        return ThumbprintEncoding(encoding)
    except ValueError:
        raise UnsupportedEncoding(encoding) from None


def _check_truncate(truncate: Optional[int]) -> Optional[int]:
    if truncate is None:
        return None
    if isinstance(truncate, bool) or not isinstance(truncate, int):
        raise InvalidArgument(f"truncate must be an integer, got {truncate!r}")
    if truncate <= 0 or truncate > SHA256_DIGEST_SIZE:
        raise InvalidArgument(f"truncate must be between 1 and {SHA256_DIGEST_SIZE}, got {truncate}")
    return truncate


def thumbprint_digest(key: KeyDescriptor, truncate: Optional[int] = None) -> bytes:
    """
    SHA-256 over the canonical JSON of the key, optionally keeping only the
    leftmost `truncate` bytes.
    """
    truncate = _check_truncate(truncate)
    digest = hashlib.sha256(canonical_bytes(key)).digest()
    if truncate is not None:
        logger.debug("Truncating %s thumbprint to %d bytes", key.kty, truncate)
        digest = digest[:truncate]
    return digest


def encode_digest(
    digest: bytes,
    encoding: Union[ThumbprintEncoding, str],
    charset: Optional[CharacterSet] = None,
) -> str:
    encoding = _resolve_encoding(encoding)
    if encoding is ThumbprintEncoding.BASE64URL:
        return b64url_encode(digest)
    if encoding is ThumbprintEncoding.BASE62:
        return Base62Codec(charset or get_settings().base62_charset).encode(digest)
    raise UnsupportedEncoding(encoding)


def compute_thumbprint(
    key: KeyDescriptor,
    encoding: Union[ThumbprintEncoding, str, None] = None,
    truncate: Optional[int] = None,
) -> str:
    """
    Calculate the RFC 7638 thumbprint of a key using SHA-256.

    `encoding` picks base64url (no padding) or base62 for the output.
    `truncate` keeps only the leftmost bytes of the hash before encoding.
    Both fall back to the configured defaults when omitted.
    """
    # Unsupported selectors fail before any hashing.
    resolved = _resolve_encoding(encoding)
    if truncate is None:
        truncate = get_settings().default_truncate

    digest = thumbprint_digest(key, truncate)
    logger.debug("Encoding %s thumbprint as %s", key.kty, resolved.value)
    return encode_digest(digest, resolved)


def compute_sha256_thumbprint_ec(
    crv: str,
    x: bytes,
    y: bytes,
    encoding: Union[ThumbprintEncoding, str, None] = None,
    truncate: Optional[int] = None,
) -> str:
    return compute_thumbprint(build_key(ECKey, crv=crv, x=x, y=y), encoding, truncate)


def compute_sha256_thumbprint_rsa(
    e: bytes,
    n: bytes,
    encoding: Union[ThumbprintEncoding, str, None] = None,
    truncate: Optional[int] = None,
) -> str:
    return compute_thumbprint(build_key(RSAKey, e=e, n=n), encoding, truncate)


def compute_sha256_thumbprint_octet(
    k: bytes,
    encoding: Union[ThumbprintEncoding, str, None] = None,
    truncate: Optional[int] = None,
) -> str:
    return compute_thumbprint(build_key(OctetKey, k=k), encoding, truncate)
