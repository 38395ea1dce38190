"""Program derived address search."""

from __future__ import annotations

import hashlib
from typing import Callable, Sequence

from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.config import MAX_BUMP_SEED, MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER
from solpda.errors import NoValidBumpFound, SeedTooLong, TooManySeeds


def is_off_curve(candidate: bytes) -> bool:
    """True if the 32 bytes do not decompress to an ed25519 point."""
    return not Pubkey.from_bytes(candidate).is_on_curve()


def create_program_address(
    seeds: Sequence[bytes], program_id: Pubkey, bump: int | None = None
) -> bytes:
    """Hash one candidate address. No curve check is made."""
    h = hashlib.sha256()
    for s in seeds:
        h.update(s)
    if bump is not None:
        h.update(bytes([bump]))
    h.update(bytes(program_id))
    h.update(PDA_MARKER)
    return h.digest()


def _check_seeds(seeds: Sequence[bytes]) -> None:
    if len(seeds) > MAX_SEEDS:
        raise TooManySeeds(f"{len(seeds)} seeds given, at most {MAX_SEEDS} allowed")
    for i, s in enumerate(seeds):
        if len(s) > MAX_SEED_LEN:
            raise SeedTooLong(
                f"seed is {len(s)} bytes, maximum is {MAX_SEED_LEN}",
                source=f"seed #{i + 1}",
            )


def derive(
    program_id: Pubkey,
    seeds: Sequence[bytes],
    allow_bump: bool = True,
    off_curve: Callable[[bytes], bool] = is_off_curve,
) -> tuple[Pubkey, int | None]:
    """Derive the address for ``seeds`` under ``program_id``.

    With ``allow_bump`` the bump seed is swept from 255 down to 0 and the
    first candidate for which ``off_curve`` holds is returned along with its
    bump. Without it the unbumped digest is returned as is, on curve or not,
    and the bump is None.
    """
    _check_seeds(seeds)

    if not allow_bump:
        return Pubkey.from_bytes(create_program_address(seeds, program_id)), None

    for bump in range(MAX_BUMP_SEED, -1, -1):
        candidate = create_program_address(seeds, program_id, bump)
        if off_curve(candidate):
            return Pubkey.from_bytes(candidate), bump

    raise NoValidBumpFound("no bump seed in [0, 255] yields an off-curve address")
