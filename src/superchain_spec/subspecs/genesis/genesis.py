"""
The genesis block descriptor.

A `Genesis` holds everything needed to derive a chain's first block header.
Its hash is the chain's identity: two descriptors that differ in any header
field produce different chains.
"""

from __future__ import annotations

from typing import Final

from superchain_spec.subspecs.chain_config import ChainConfig
from superchain_spec.types import (
    ZERO_ADDRESS,
    ZERO_HASH,
    Address,
    Bytes32,
    StrictBaseModel,
    Uint64,
    Uint256,
)

MAX_EXTRA_DATA_BYTES: Final = 32
"""Largest extra-data a block header may carry."""


class Genesis(StrictBaseModel):
    """Header fields and configuration of a chain's genesis block."""

    config: ChainConfig
    """The chain configuration the genesis block is produced under."""

    nonce: Uint64 = Uint64(0)
    timestamp: Uint64
    extra_data: bytes
    gas_limit: Uint64
    difficulty: Uint256 | None = None
    """Unset means "use the execution client's genesis default"."""

    mix_hash: Bytes32 = ZERO_HASH
    coinbase: Address = ZERO_ADDRESS

    alloc: None = None
    """
    State allocation placeholder.

    Accounts are not populated, so the derived state root is always the
    empty trie root. Chains whose real genesis allocates state fail hash
    verification instead of passing with a wrong state.
    """

    number: Uint64 = Uint64(0)
    gas_used: Uint64 = Uint64(0)
    parent_hash: Bytes32 = ZERO_HASH
    base_fee: Uint256 | None = None
    """Unset means "use the initial base fee" when London is active at genesis."""
