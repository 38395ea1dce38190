"""Typed seed tokens and their canonical byte encoding.

A seed token has the form ``TYPE[values]``:

    u8[1,2,3]        one 1-byte seed per value
    u16[500]         one 2-byte little-endian seed per value
    u32[...]         one 4-byte little-endian seed per value
    u64[...]         one 8-byte little-endian seed per value
    String[text]     one seed, the UTF-8 bytes of text (commas included)
    Pubkey[base58]   one seed, the 32 raw key bytes
    Sha256[TOKEN]    one seed, the SHA-256 digest of TOKEN's single seed
"""

from __future__ import annotations

import hashlib
import re
import struct
from dataclasses import dataclass
from typing import Callable, ClassVar, Iterable, Union

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.codec import decode_pubkey
from solpda.config import MAX_SEED_LEN
from solpda.errors import (
    MalformedToken,
    PdaError,
    SeedTooLong,
    UnknownSeedType,
    ValueOutOfRange,
)

_DECIMAL = re.compile(r"[0-9]+")


@dataclass(frozen=True)
class _IntSeed:
    values: tuple[int, ...]

    TYPE_NAME: ClassVar[str] = ""
    FORMAT: ClassVar[str] = ""

    @classmethod
    def max_value(cls) -> int:
        return (1 << (8 * struct.calcsize(cls.FORMAT))) - 1

    def __post_init__(self) -> None:
        for v in self.values:
            if v < 0 or v > self.max_value():
                raise ValueOutOfRange(
                    f"{v} out of range for {self.TYPE_NAME} [0, {self.max_value()}]"
                )

    def encode(self) -> list[bytes]:
        return [struct.pack(self.FORMAT, v) for v in self.values]


class U8Seed(_IntSeed):
    TYPE_NAME = "u8"
    FORMAT = "<B"


class U16Seed(_IntSeed):
    TYPE_NAME = "u16"
    FORMAT = "<H"


class U32Seed(_IntSeed):
    TYPE_NAME = "u32"
    FORMAT = "<I"


class U64Seed(_IntSeed):
    TYPE_NAME = "u64"
    FORMAT = "<Q"


@dataclass(frozen=True)
class StrSeed:
    value: str

    def encode(self) -> list[bytes]:
        return [self.value.encode("utf-8")]


@dataclass(frozen=True)
class PubkeySeed:
    key: Pubkey

    def encode(self) -> list[bytes]:
        return [bytes(self.key)]


@dataclass(frozen=True)
class HashedSeed:
    """SHA-256 of a nested seed value, which must encode to exactly one seed."""

    inner: "SeedValue"

    def encode(self) -> list[bytes]:
        inner = self.inner.encode()
        if len(inner) != 1:
            raise MalformedToken(
                f"Sha256 expects a nested seed with exactly one value, got {len(inner)}"
            )
        return [hashlib.sha256(inner[0]).digest()]


SeedValue = Union[U8Seed, U16Seed, U32Seed, U64Seed, StrSeed, PubkeySeed, HashedSeed]


def _parse_ints(body: str, cls: type[_IntSeed]) -> tuple[int, ...]:
    compact = "".join(body.split())
    if not compact:
        raise MalformedToken(f"{cls.TYPE_NAME} needs at least one value")
    values = []
    for item in compact.split(","):
        if not _DECIMAL.fullmatch(item):
            raise MalformedToken(
                f"{cls.TYPE_NAME} value is not an unsigned integer: {item!r}"
            )
        # Too many digits is out of range before int() ever sees it.
        digits = item.lstrip("0") or "0"
        if len(digits) > len(str(cls.max_value())):
            raise ValueOutOfRange(
                f"{digits[:24]}... out of range for {cls.TYPE_NAME} [0, {cls.max_value()}]"
            )
        v = int(digits)
        if v > cls.max_value():
            raise ValueOutOfRange(
                f"{v} out of range for {cls.TYPE_NAME} [0, {cls.max_value()}]"
            )
        values.append(v)
    return tuple(values)


def _int_parser(cls: type[_IntSeed]) -> Callable[[str], SeedValue]:
    return lambda body: cls(_parse_ints(body, cls))


_PARSERS: dict[str, Callable[[str], SeedValue]] = {
    "u8": _int_parser(U8Seed),
    "u16": _int_parser(U16Seed),
    "u32": _int_parser(U32Seed),
    "u64": _int_parser(U64Seed),
    "String": StrSeed,
    "Pubkey": lambda body: PubkeySeed(decode_pubkey(body)),
    "Sha256": lambda body: HashedSeed(parse_seed(body)),
}


def parse_seed(token: str) -> SeedValue:
    open_at = token.find("[")
    if open_at <= 0 or not token.endswith("]"):
        raise MalformedToken(f"expected TYPE[values], got {token!r}")
    kind, body = token[:open_at], token[open_at + 1 : -1]
    parser = _PARSERS.get(kind)
    if parser is None:
        raise UnknownSeedType(
            f"unknown seed type {kind!r}, expected one of {', '.join(_PARSERS)}"
        )
    return parser(body)


def encode_seed(token: str) -> list[bytes]:
    seeds = parse_seed(token).encode()
    for seed in seeds:
        if len(seed) > MAX_SEED_LEN:
            raise SeedTooLong(
                f"seed is {len(seed)} bytes, maximum is {MAX_SEED_LEN}"
            )
    return seeds


def encode_seeds(tokens: Iterable[str]) -> list[bytes]:
    """Encode seed tokens in order; errors name the offending token."""
    out: list[bytes] = []
    for i, token in enumerate(tokens):
        try:
            out.extend(encode_seed(token))
        except PdaError as e:
            e.source = f"seed #{i + 1} {token!r}"
            raise
    return out
