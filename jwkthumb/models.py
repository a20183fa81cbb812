from __future__ import annotations

from enum import Enum
from typing import Literal, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .errors import InvalidInput


class ThumbprintEncoding(str, Enum):
    """Text encoding applied to the (possibly truncated) digest."""

    BASE64URL = "base64url"
    BASE62 = "base62"


class CharacterSet(str, Enum):
    """
    Alphabet used by the base62 codec.

    DEFAULT: numbers, upper case, lower case.
    INVERTED: numbers, lower case, upper case.
    """

    DEFAULT = "default"
    INVERTED = "inverted"


class ECKey(BaseModel):
    kty: Literal["EC"] = "EC"
    crv: str
    x: bytes
    y: bytes

    model_config = {"frozen": True, "extra": "forbid", "strict": True}


class RSAKey(BaseModel):
    kty: Literal["RSA"] = "RSA"
    e: bytes
    n: bytes

    model_config = {"frozen": True, "extra": "forbid", "strict": True}


class OctetKey(BaseModel):
    kty: Literal["oct"] = "oct"
    k: bytes

    model_config = {"frozen": True, "extra": "forbid", "strict": True}


# Raw (unencoded) public parameters of a key; one shape per supported kty.
KeyDescriptor = Union[ECKey, RSAKey, OctetKey]

_K = TypeVar("_K", ECKey, RSAKey, OctetKey)


def build_key(model: Type[_K], **fields) -> _K:
    """
    Construct a key descriptor, reporting missing or malformed fields as InvalidInput.
    """
    try:
        return model(**fields)
    except ValidationError as exc:
        problems = "; ".join(f"{'.'.join(map(str, err['loc']))}: {err['msg']}" for err in exc.errors())
        raise InvalidInput(f"Invalid {model.__name__}: {problems}") from exc
