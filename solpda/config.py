"""Protocol constants for program derived addresses."""

PUBKEY_LEN = 32

MAX_SEED_LEN = 32
MAX_SEEDS = 16
MAX_BUMP_SEED = 255

PDA_MARKER = b"ProgramDerivedAddress"
