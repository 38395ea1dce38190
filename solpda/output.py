"""Render keys and derived addresses for display."""

from __future__ import annotations

from enum import Enum

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.codec import encode_base58, render_byte_array


class OutputMode(Enum):
    BYTES = "bytes"
    BASE58 = "base58"


def format_value(value: Pubkey, mode: OutputMode, bump: int | None = None) -> str:
    raw = bytes(value)
    if mode is OutputMode.BYTES:
        text = render_byte_array(raw)
    else:
        text = encode_base58(raw)
    if bump is not None:
        text += f".{bump}"
    return text
