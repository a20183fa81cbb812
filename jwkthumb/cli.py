from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .base62 import Base62Codec
from .config import get_settings
from .errors import InvalidInput, ThumbprintError
from .jose_utils import b64url_decode
from .keys import descriptor_from_pem
from .jwk_thumbprint import compute_thumbprint
from .models import CharacterSet, ECKey, KeyDescriptor, OctetKey, RSAKey, ThumbprintEncoding, build_key

logger = logging.getLogger("jwkthumb.cli")


def setup_logging() -> None:
    log_level = get_settings().log_level.upper()
    if not logging.getLogger().handlers:
        logging.basicConfig(
            level=log_level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s"
        )
    logging.getLogger("jwkthumb").setLevel(log_level)


def _param(args: argparse.Namespace, name: str) -> bytes:
    value = getattr(args, name)
    if not value:
        raise InvalidInput(f"--{name} is required for kty={args.kty}")
    try:
        return b64url_decode(value)
    except ValueError as exc:
        raise InvalidInput(f"--{name} is not valid base64url: {exc}") from exc


def _key_from_args(args: argparse.Namespace) -> KeyDescriptor:
    if args.pem:
        try:
            pem = Path(args.pem).read_bytes()
        except OSError as exc:
            raise InvalidInput(f"Could not read PEM file {args.pem}: {exc.strerror or exc}") from exc
        return descriptor_from_pem(pem)
    if args.kty == "EC":
        if not args.crv:
            raise InvalidInput("--crv is required for kty=EC")
        return build_key(ECKey, crv=args.crv, x=_param(args, "x"), y=_param(args, "y"))
    if args.kty == "RSA":
        return build_key(RSAKey, e=_param(args, "e"), n=_param(args, "n"))
    if args.kty == "oct":
        return build_key(OctetKey, k=_param(args, "k"))
    raise InvalidInput("either --pem or --kty is required")


def _cmd_thumbprint(args: argparse.Namespace) -> str:
    key = _key_from_args(args)
    logger.info("Computing %s thumbprint", key.kty)
    return compute_thumbprint(key, args.encoding, args.truncate)


def _cmd_base62(args: argparse.Namespace) -> str:
    codec = Base62Codec(CharacterSet(args.charset))
    if args.action == "encode":
        if not args.hex:
            return codec.encode_text(args.value, "utf-8")
        try:
            return codec.encode(bytes.fromhex(args.value))
        except ValueError as exc:
            raise InvalidInput(f"value is not valid hex: {exc}") from exc
    data = codec.decode(args.value)
    if args.hex:
        return data.hex()
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise InvalidInput("decoded bytes are not UTF-8 text, use --hex") from exc


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="jwkthumb",
        description="RFC 7638 JWK thumbprints with base64url or base62 output",
    )
    sub = ap.add_subparsers(dest="command", required=True)

    tp = sub.add_parser("thumbprint", help="Compute the thumbprint of a public key")
    tp.add_argument("--pem", help="Path to a PEM public key (EC or RSA)")
    tp.add_argument("--kty", choices=["EC", "RSA", "oct"], help="Key type when passing raw parameters")
    tp.add_argument("--crv", help="EC curve, e.g. P-256")
    for name in ("x", "y", "e", "n", "k"):
        tp.add_argument(f"--{name}", help=f"'{name}' parameter (base64url)")
    tp.add_argument(
        "--encoding",
        choices=[e.value for e in ThumbprintEncoding],
        default=None,
        help="Output encoding (default from JWKTHUMB_DEFAULT_ENCODING)",
    )
    tp.add_argument("--truncate", type=int, default=None, help="Keep only the leftmost N hash bytes")
    tp.set_defaults(func=_cmd_thumbprint)

    b62 = sub.add_parser("base62", help="Encode or decode base62 text")
    b62.add_argument("action", choices=["encode", "decode"])
    b62.add_argument("value")
    b62.add_argument("--charset", choices=[c.value for c in CharacterSet], default=CharacterSet.DEFAULT.value)
    b62.add_argument("--hex", action="store_true", help="Treat raw bytes as hex instead of UTF-8 text")
    b62.set_defaults(func=_cmd_base62)

    return ap


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    args = build_parser().parse_args(argv)
    try:
        print(args.func(args))
    except ThumbprintError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0
