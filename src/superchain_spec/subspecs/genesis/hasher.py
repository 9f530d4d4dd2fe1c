"""Genesis hashing engines."""

from __future__ import annotations

from typing import Protocol

from superchain_spec.types import Bytes32

from .genesis import Genesis
from .header import BlockHeader


class GenesisHasher(Protocol):
    """Computes the block hash a genesis descriptor commits to."""

    def hash(self, genesis: Genesis) -> Bytes32:
        """Return the genesis block hash. Must be deterministic."""
        ...


class KeccakGenesisHasher:
    """Hashes the RLP-encoded genesis header with keccak-256."""

    def hash(self, genesis: Genesis) -> Bytes32:
        return BlockHeader.from_genesis(genesis).block_hash()
