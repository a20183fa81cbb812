import base64
import json
from typing import Any, Dict


def b64url_encode(data: bytes) -> str:
    """RFC 4648 section 5 alphabet, '=' padding stripped."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(data: str) -> bytes:
    # Unpadded input is the norm for JWK members.
    padded = data + "=" * (-len(data) % 4)
    return base64.urlsafe_b64decode(padded.encode("ascii"))


def dumps_canonical(members: Dict[str, Any]) -> str:
    """
    JSON-encode with keys sorted by code point and no whitespace.
    """
    return json.dumps(members, sort_keys=True, separators=(",", ":"), ensure_ascii=True)
