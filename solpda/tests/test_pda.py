"""PDA derivation tests."""

import hashlib
import struct

import pytest
from solders.keypair import Keypair  # type: ignore[import-untyped]
from solders.pubkey import Pubkey  # type: ignore[import-untyped]

from solpda.errors import NoValidBumpFound, SeedTooLong, TooManySeeds
from solpda.pda import create_program_address, derive, is_off_curve
from solpda.seeds import encode_seeds

PROGRAM_ID = Pubkey.from_string("TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA")
OTHER_KEY = Pubkey.from_string("4uQeVj5tqViQh7yWWGStvkEG1Zmhx6uasJtWCJziofM")

SEED_SETS = [
    [],
    [b"hello"],
    [b"\x05", b"\x06", b"Hello, world!", b"\x0a"],
    [bytes(OTHER_KEY), struct.pack("<Q", 42)],
    [b"x" * 32],
]


def _never_called(candidate: bytes) -> bool:
    raise AssertionError("curve predicate must not run without a bump seed")


class TestCreateProgramAddress:
    def test_hash_layout(self):
        expected = hashlib.sha256(
            b"ab" + b"c" + bytes([7]) + bytes(PROGRAM_ID) + b"ProgramDerivedAddress"
        ).digest()
        assert create_program_address([b"ab", b"c"], PROGRAM_ID, 7) == expected

    def test_without_bump(self):
        expected = hashlib.sha256(
            b"ab" + bytes(PROGRAM_ID) + b"ProgramDerivedAddress"
        ).digest()
        assert create_program_address([b"ab"], PROGRAM_ID) == expected


class TestIsOffCurve:
    def test_wallet_key_is_on_curve(self):
        assert not is_off_curve(bytes(Keypair().pubkey()))

    def test_pda_is_off_curve(self):
        pda, _ = Pubkey.find_program_address([b"hello"], PROGRAM_ID)
        assert is_off_curve(bytes(pda))


class TestDeriveMatchesReference:
    @pytest.mark.parametrize("seeds", SEED_SETS)
    def test_find_program_address(self, seeds):
        assert derive(PROGRAM_ID, seeds) == Pubkey.find_program_address(seeds, PROGRAM_ID)

    @pytest.mark.parametrize("seeds", SEED_SETS)
    def test_result_is_off_curve_with_bump(self, seeds):
        pda, bump = derive(PROGRAM_ID, seeds)
        assert 0 <= bump <= 255
        assert is_off_curve(bytes(pda))
        assert Pubkey.create_program_address(seeds + [bytes([bump])], PROGRAM_ID) == pda

    def test_documented_example(self):
        seeds = encode_seeds(["u8[5,6]", "String[Hello, world!]", "u8[10]"])
        pda, bump = derive(PROGRAM_ID, seeds)
        assert (str(pda), bump) == ("A89GCYdsataUVrFDbrV416NEZnFZoa6X4CR5ZdSPJohC", 255)

    def test_from_seed_tokens(self):
        seeds = encode_seeds(["u8[5,6]", "String[Hello, world!]", "u8[10]"])
        expected = Pubkey.find_program_address(
            [b"\x05\x06Hello, world!\x0a"], PROGRAM_ID
        )
        assert derive(PROGRAM_ID, seeds) == expected

    def test_deterministic(self):
        seeds = [b"journal", struct.pack("<Q", 7)]
        assert derive(PROGRAM_ID, seeds) == derive(PROGRAM_ID, seeds)

    def test_different_seeds_differ(self):
        addr1, _ = derive(PROGRAM_ID, [struct.pack("<Q", 1)])
        addr2, _ = derive(PROGRAM_ID, [struct.pack("<Q", 2)])
        assert addr1 != addr2


class TestBumpSearch:
    def test_highest_valid_bump_wins(self):
        seeds = [b"seed"]
        valid = {create_program_address(seeds, PROGRAM_ID, b): b for b in (253, 100, 3)}
        pda, bump = derive(PROGRAM_ID, seeds, off_curve=lambda c: c in valid)
        assert bump == 253
        assert bytes(pda) == create_program_address(seeds, PROGRAM_ID, 253)

    def test_visits_bumps_in_descending_order(self):
        seeds = [b"seed"]
        by_digest = {create_program_address(seeds, PROGRAM_ID, b): b for b in range(256)}
        visited = []

        def reject(candidate: bytes) -> bool:
            visited.append(by_digest[candidate])
            return False

        with pytest.raises(NoValidBumpFound):
            derive(PROGRAM_ID, seeds, off_curve=reject)
        assert visited == list(range(255, -1, -1))

    def test_bump_zero_is_tried(self):
        seeds = [b"seed"]
        last = create_program_address(seeds, PROGRAM_ID, 0)
        _, bump = derive(PROGRAM_ID, seeds, off_curve=lambda c: c == last)
        assert bump == 0


class TestNoBump:
    def test_returns_digest_without_curve_check(self):
        seeds = [b"\x05", b"\x06", b"Hello, world!"]
        pda, bump = derive(PROGRAM_ID, seeds, allow_bump=False, off_curve=_never_called)
        assert bump is None
        assert bytes(pda) == create_program_address(seeds, PROGRAM_ID)

    def test_matches_reference_when_off_curve(self):
        seeds = [b"\x05", b"\x06", b"Hello, world!"]
        pda, bump = derive(PROGRAM_ID, seeds)
        unbumped, _ = derive(PROGRAM_ID, seeds + [bytes([bump])], allow_bump=False)
        assert unbumped == pda


class TestSeedLimits:
    def test_seed_too_long(self):
        with pytest.raises(SeedTooLong) as exc:
            derive(PROGRAM_ID, [b"ok", b"x" * 33])
        assert exc.value.source == "seed #2"

    def test_seed_too_long_checked_before_hashing(self):
        with pytest.raises(SeedTooLong):
            derive(PROGRAM_ID, [b"x" * 33], allow_bump=False, off_curve=_never_called)

    def test_sixteen_seeds_with_bump(self):
        _, bump = derive(PROGRAM_ID, [b"s"] * 16, off_curve=lambda c: True)
        assert bump == 255
        with pytest.raises(TooManySeeds):
            derive(PROGRAM_ID, [b"s"] * 17, off_curve=lambda c: True)

    def test_sixteen_seeds_without_bump(self):
        derive(PROGRAM_ID, [b"s"] * 16, allow_bump=False)
        with pytest.raises(TooManySeeds):
            derive(PROGRAM_ID, [b"s"] * 17, allow_bump=False)
