from solpda.codec import (
    decode_base58,
    decode_pubkey,
    encode_base58,
    parse_byte_array_literal,
    render_byte_array,
)
from solpda.config import MAX_BUMP_SEED, MAX_SEED_LEN, MAX_SEEDS, PDA_MARKER
from solpda.errors import (
    InvalidEncoding,
    InvalidKey,
    InvalidLiteral,
    MalformedToken,
    NoValidBumpFound,
    PdaError,
    SeedTooLong,
    TooManySeeds,
    UnknownSeedType,
    ValueOutOfRange,
)
from solpda.keys import resolve_key
from solpda.output import OutputMode, format_value
from solpda.pda import create_program_address, derive, is_off_curve
from solpda.seeds import (
    HashedSeed,
    PubkeySeed,
    SeedValue,
    StrSeed,
    U8Seed,
    U16Seed,
    U32Seed,
    U64Seed,
    encode_seed,
    encode_seeds,
    parse_seed,
)

__all__ = [
    "MAX_BUMP_SEED",
    "MAX_SEED_LEN",
    "MAX_SEEDS",
    "PDA_MARKER",
    "InvalidEncoding",
    "InvalidKey",
    "InvalidLiteral",
    "MalformedToken",
    "NoValidBumpFound",
    "PdaError",
    "SeedTooLong",
    "TooManySeeds",
    "UnknownSeedType",
    "ValueOutOfRange",
    "HashedSeed",
    "OutputMode",
    "PubkeySeed",
    "SeedValue",
    "StrSeed",
    "U8Seed",
    "U16Seed",
    "U32Seed",
    "U64Seed",
    "create_program_address",
    "decode_base58",
    "decode_pubkey",
    "derive",
    "encode_base58",
    "encode_seed",
    "encode_seeds",
    "format_value",
    "is_off_curve",
    "parse_byte_array_literal",
    "parse_seed",
    "render_byte_array",
    "resolve_key",
]
