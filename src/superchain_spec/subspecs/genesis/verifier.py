"""
Genesis verification.

A built genesis is only trusted once its recomputed hash matches the hash
the registry records for the chain. Nothing downstream should consume a
`Genesis` that did not come out of `verify_genesis`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from superchain_spec.subspecs.registry import RegistryAdapter, default_registry, require_chain
from superchain_spec.types import Bytes32, GenesisHashMismatchError

from .builder import genesis_for
from .genesis import Genesis
from .hasher import GenesisHasher, KeccakGenesisHasher

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class VerifiedGenesis:
    """A genesis whose hash matched the registry's expected value."""

    genesis: Genesis
    block_hash: Bytes32


def verify_genesis(
    genesis: Genesis,
    expected_hash: bytes,
    *,
    chain_id: int,
    hasher: GenesisHasher | None = None,
) -> VerifiedGenesis:
    """
    Recompute the genesis hash and compare it to the expected one.

    Args:
        genesis: The candidate genesis.
        expected_hash: The hash the registry records for this chain.
        chain_id: The chain being verified, for error context.
        hasher: Hashing engine. Defaults to `KeccakGenesisHasher`.

    Raises:
        GenesisHashMismatchError: If the hashes differ in any byte.
    """
    if hasher is None:
        hasher = KeccakGenesisHasher()

    computed = hasher.hash(genesis)
    if bytes(computed) != bytes(expected_hash):
        logger.warning(
            "Genesis hash mismatch for chain %d: computed 0x%s, expected 0x%s",
            chain_id,
            computed.hex(),
            expected_hash.hex(),
        )
        raise GenesisHashMismatchError(chain_id, bytes(computed), bytes(expected_hash))

    return VerifiedGenesis(genesis=genesis, block_hash=Bytes32(computed))


def build_and_verify_genesis(
    chain_id: int,
    registry: RegistryAdapter | None = None,
    hasher: GenesisHasher | None = None,
) -> VerifiedGenesis:
    """
    Build a chain's genesis and release it only if its hash checks out.

    Raises:
        UnknownChainError: If the chain is not registered.
        UnknownSuperchainError: If the chain's superchain group is not registered.
        ExtraDataTooLargeError: If the effective extra-data exceeds 32 bytes.
        GenesisHashMismatchError: If the built genesis does not hash to the
            registry's expected value.
    """
    if registry is None:
        registry = default_registry()

    chain = require_chain(registry, chain_id)
    genesis = genesis_for(chain, registry)

    verified = verify_genesis(genesis, chain.genesis.l2_hash, chain_id=chain_id, hasher=hasher)
    logger.debug("Verified genesis for chain %d: 0x%s", chain_id, verified.block_hash.hex())
    return verified
