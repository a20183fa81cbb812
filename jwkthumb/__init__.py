from .base62 import Base62Codec, convert_base
from .canonical import canonical_bytes, canonical_json
from .errors import (
    InvalidArgument,
    InvalidCharacter,
    InvalidInput,
    ThumbprintError,
    UnsupportedEncoding,
)
from .jwk_thumbprint import (
    compute_sha256_thumbprint_ec,
    compute_sha256_thumbprint_octet,
    compute_sha256_thumbprint_rsa,
    compute_thumbprint,
    thumbprint_digest,
)
from .models import CharacterSet, ECKey, KeyDescriptor, OctetKey, RSAKey, ThumbprintEncoding, build_key

__version__ = "0.1.0"

__all__ = [
    "Base62Codec",
    "CharacterSet",
    "ECKey",
    "InvalidArgument",
    "InvalidCharacter",
    "InvalidInput",
    "KeyDescriptor",
    "OctetKey",
    "RSAKey",
    "ThumbprintEncoding",
    "ThumbprintError",
    "UnsupportedEncoding",
    "build_key",
    "canonical_bytes",
    "canonical_json",
    "compute_sha256_thumbprint_ec",
    "compute_sha256_thumbprint_octet",
    "compute_sha256_thumbprint_rsa",
    "compute_thumbprint",
    "convert_base",
    "thumbprint_digest",
]
