"""Command line interface: compute a program derived address or display a key."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from solpda.errors import PdaError
from solpda.keys import resolve_key
from solpda.output import OutputMode, format_value
from solpda.pda import derive, is_off_curve
from solpda.seeds import encode_seeds

DESCRIPTION = """\
Compute the Solana Program Derived Address for a program and a set of seeds.

Unless --no-bump-seed is given, a bump seed is appended automatically,
starting at 255 and counting down until the address is off the ed25519
curve, and printed after the address as ".BUMP".

PROGRAM_ID is a base58 address, a file holding a JSON array of key bytes
(a public key or a keypair file), or a literal array of bytes.
"""

SEED_HELP = """\
seed types:
  u8[values]      comma-separated numbers in [0, 255]
  u16[values]     comma-separated numbers in [0, 65535]
  u32[values]     comma-separated numbers in [0, 4294967295]
  u64[values]     comma-separated numbers in [0, 18446744073709551615]
  String[value]   a string, commas included
  Pubkey[value]   a base58 ed25519 public key
  Sha256[SEED]    the SHA-256 digest of another seed, e.g. Sha256[u8[10]]

examples:
  solpda TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA u8[5,6] 'String[Hello, world!]'
  solpda --bytes TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA u8[5,6]
  solpda -pubkey --bytes ~/.config/solana/id.json
"""


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="solpda",
        description=DESCRIPTION,
        epilog=SEED_HELP,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    ap.add_argument("program_id", metavar="PROGRAM_ID", help="program id or key to read")
    ap.add_argument("seeds", metavar="SEED", nargs="*", help="typed seed, see below")
    ap.add_argument(
        "--no-bump-seed",
        action="store_true",
        help="hash the seeds as given, without searching for a bump seed",
    )
    ap.add_argument(
        "--bytes",
        action="store_true",
        help="print a byte array instead of a base58 string",
    )
    ap.add_argument(
        "-pubkey",
        "--pubkey",
        dest="pubkey_only",
        action="store_true",
        help="only read PROGRAM_ID and print the key it holds",
    )
    ap.add_argument("--verbose", action="store_true", help="print diagnostics to stderr")
    return ap


def main(argv: Sequence[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)
    mode = OutputMode.BYTES if args.bytes else OutputMode.BASE58

    if not args.pubkey_only and not args.seeds:
        ap.error("at least one SEED is required unless -pubkey is given")

    try:
        try:
            program_id = resolve_key(args.program_id)
        except PdaError as e:
            e.source = "program id"
            raise
        if args.verbose:
            print(f"program_id={program_id}", file=sys.stderr)

        if args.pubkey_only:
            print(format_value(program_id, mode))
            return 0

        seeds = encode_seeds(args.seeds)
        if args.verbose:
            for i, s in enumerate(seeds):
                print(f"- seed[{i}] len={len(s)} hex={s.hex()}", file=sys.stderr)

        pda, bump = derive(program_id, seeds, allow_bump=not args.no_bump_seed)
    except PdaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.verbose:
        if bump is None:
            if not is_off_curve(bytes(pda)):
                print(
                    "warning: address is on the ed25519 curve, not a usable PDA",
                    file=sys.stderr,
                )
        else:
            print(f"bump={bump} after {256 - bump} attempt(s)", file=sys.stderr)

    print(format_value(pda, mode, bump))
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
