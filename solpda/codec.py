"""Base58 and byte-array literal encodings for keys and addresses."""

from __future__ import annotations

import re

import base58  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.config import PUBKEY_LEN
from solpda.errors import InvalidEncoding, InvalidLiteral

_ALPHABET = frozenset(base58.BITCOIN_ALPHABET.decode("ascii"))
_DECIMAL = re.compile(r"[0-9]+")


def encode_base58(data: bytes) -> str:
    return base58.b58encode(data).decode("ascii")


def decode_base58(text: str) -> bytes:
    """Decode base58 text, rejecting empty input and foreign characters.

    The base58 library tolerates trailing whitespace; it is rejected here so
    that decoding and re-encoding always gives back the original text.
    """
    if not text:
        raise InvalidEncoding("empty base58 string")
    bad = sorted(set(text) - _ALPHABET)
    if bad:
        raise InvalidEncoding(
            f"invalid base58 character(s) {''.join(bad)!r} in {text!r}"
        )
    return base58.b58decode(text)


def decode_pubkey(text: str) -> Pubkey:
    raw = decode_base58(text)
    if len(raw) != PUBKEY_LEN:
        raise InvalidEncoding(
            f"{text!r} decodes to {len(raw)} bytes, expected {PUBKEY_LEN}"
        )
    return Pubkey.from_bytes(raw)


def parse_byte_array_literal(text: str) -> bytes:
    """Parse ``[1, 2, 3]`` into bytes. Whitespace anywhere is ignored."""
    compact = "".join(text.split())
    if not (compact.startswith("[") and compact.endswith("]")) or len(compact) < 2:
        raise InvalidLiteral(f"byte array must be enclosed in brackets: {text!r}")
    body = compact[1:-1]
    if not body:
        raise InvalidLiteral("byte array is empty")

    out = bytearray()
    for i, item in enumerate(body.split(",")):
        if not _DECIMAL.fullmatch(item):
            raise InvalidLiteral(f"element {i} is not a decimal number: {item!r}")
        digits = item.lstrip("0") or "0"
        if len(digits) > 3:
            raise InvalidLiteral(f"element {i} out of range [0, 255]: {digits[:24]}...")
        v = int(digits)
        if v > 255:
            raise InvalidLiteral(f"element {i} out of range [0, 255]: {v}")
        out.append(v)
    return bytes(out)


def render_byte_array(data: bytes) -> str:
    return "[" + ",".join(str(b) for b in data) + "]"
