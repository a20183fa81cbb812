from __future__ import annotations

import pytest

from jwkthumb.config import get_settings

# RFC 7638 section 3.1 example key
RFC7638_N = (
    "0vx7agoebGcQSuuPiLJXZptN9nndrQmbXEps2aiAFbWhM78LhWx4cbbfAAtVT86zwu1RK7aPFFxuhDR1L6tSoc_BJECPebWKRXjB"
    "ZCiFV4n3oknjhMstn64tZ_2W-5JsGY4Hc5n9yBXArwl93lqt7_RN5w6Cf0h4QyQ5v-65YGjQR0_FDW2QvzqY368QQMicAtaSqzs8"
    "KJZgnYb9c7d0zgdAZHzu6qMQvRL5hajrn1n91CbOpbISD08qNLyrdkt-bFTWhAI4vMQFh6WeZu0fM4lFd2NcRwr3XPksINHaQ-G_x"
    "BniIqbw0Ls1jF44-csFCur-kEgU8awapJzKnqDKgw"
)
RFC7638_E = "AQAB"
RFC7638_THUMBPRINT = "NzbLsXh8uDCcd-6MNwXF4W_7noWXFZAfHkxZsRGC9Xs"


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    for name in ("DEFAULT_ENCODING", "DEFAULT_TRUNCATE", "BASE62_CHARSET", "LOG_LEVEL"):
        monkeypatch.delenv(f"JWKTHUMB_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def rfc7638_key():
    from jwkthumb.jose_utils import b64url_decode
    from jwkthumb.models import RSAKey

    return RSAKey(e=b64url_decode(RFC7638_E), n=b64url_decode(RFC7638_N))
