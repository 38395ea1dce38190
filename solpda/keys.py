"""Resolve a program id or key from base58, a JSON key file or a byte literal."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.codec import decode_pubkey, parse_byte_array_literal
from solpda.config import PUBKEY_LEN
from solpda.errors import InvalidKey, InvalidLiteral, PdaError

# Solana keypair files hold the 32-byte secret followed by the 32-byte public key.
KEYPAIR_LEN = 2 * PUBKEY_LEN


def _from_base58(identifier: str) -> Pubkey:
    return decode_pubkey(identifier)


def _from_key_file(identifier: str) -> Pubkey:
    try:
        text = Path(identifier).read_text()
    except (OSError, ValueError) as e:
        raise InvalidKey(f"cannot read key file: {e}") from e

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidKey(f"key file is not JSON: {e}") from e
    if not isinstance(raw, list) or not all(
        isinstance(b, int) and not isinstance(b, bool) and 0 <= b <= 255 for b in raw
    ):
        raise InvalidKey("key file must hold a JSON array of byte values")

    if len(raw) == PUBKEY_LEN:
        return Pubkey.from_bytes(bytes(raw))
    if len(raw) == KEYPAIR_LEN:
        return Pubkey.from_bytes(bytes(raw[PUBKEY_LEN:]))
    raise InvalidKey(
        f"key file holds {len(raw)} bytes, expected {PUBKEY_LEN} or {KEYPAIR_LEN}"
    )


def _from_byte_literal(identifier: str) -> Pubkey:
    raw = parse_byte_array_literal(identifier)
    if len(raw) != PUBKEY_LEN:
        raise InvalidLiteral(f"byte array has {len(raw)} bytes, expected {PUBKEY_LEN}")
    return Pubkey.from_bytes(raw)


_RESOLVERS: list[tuple[str, Callable[[str], Pubkey]]] = [
    ("base58", _from_base58),
    ("key file", _from_key_file),
    ("byte array", _from_byte_literal),
]


def resolve_key(identifier: str) -> Pubkey:
    """Return the first successful interpretation of ``identifier``."""
    reasons = []
    for form, resolver in _RESOLVERS:
        try:
            return resolver(identifier)
        except PdaError as e:
            reasons.append(f"{form}: {e}")
    raise InvalidKey(f"cannot resolve {identifier!r} ({'; '.join(reasons)})")
