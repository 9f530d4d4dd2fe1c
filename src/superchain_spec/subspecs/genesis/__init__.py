"""Genesis construction and verification for OP-Stack chains."""

from .builder import BEDROCK_EXTRA_DATA, BEDROCK_GAS_LIMIT, build_genesis, genesis_for
from .genesis import MAX_EXTRA_DATA_BYTES, Genesis
from .hasher import GenesisHasher, KeccakGenesisHasher
from .header import EMPTY_OMMERS_HASH, EMPTY_ROOT_HASH, BlockHeader, keccak256
from .verifier import VerifiedGenesis, build_and_verify_genesis, verify_genesis

__all__ = [
    "BEDROCK_EXTRA_DATA",
    "BEDROCK_GAS_LIMIT",
    "BlockHeader",
    "EMPTY_OMMERS_HASH",
    "EMPTY_ROOT_HASH",
    "Genesis",
    "GenesisHasher",
    "KeccakGenesisHasher",
    "MAX_EXTRA_DATA_BYTES",
    "VerifiedGenesis",
    "build_and_verify_genesis",
    "build_genesis",
    "genesis_for",
    "keccak256",
    "verify_genesis",
]
