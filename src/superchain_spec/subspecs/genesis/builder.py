"""Build the candidate genesis block of a registered chain."""

from __future__ import annotations

import logging
from typing import Final

from superchain_spec.subspecs.chain_config import chain_config_for
from superchain_spec.subspecs.registry import (
    ChainMetadata,
    RegistryAdapter,
    default_registry,
    require_chain,
)
from superchain_spec.types import ExtraDataTooLargeError, Uint64

from .genesis import MAX_EXTRA_DATA_BYTES, Genesis

logger = logging.getLogger(__name__)

BEDROCK_EXTRA_DATA: Final = b"BEDROCK"
"""Extra-data of a Bedrock genesis unless the registry says otherwise."""

BEDROCK_GAS_LIMIT: Final = Uint64(30_000_000)
"""Gas limit of every Bedrock genesis block."""


def build_genesis(chain_id: int, registry: RegistryAdapter | None = None) -> Genesis:
    """
    Build the unverified genesis descriptor of a chain.

    The result is a candidate only. Pass it through `verify_genesis` before
    trusting it.

    Raises:
        UnknownChainError: If the chain is not registered.
        UnknownSuperchainError: If the chain's superchain group is not registered.
        ExtraDataTooLargeError: If the effective extra-data exceeds 32 bytes.
    """
    if registry is None:
        registry = default_registry()
    return genesis_for(require_chain(registry, chain_id), registry)


def genesis_for(chain: ChainMetadata, registry: RegistryAdapter) -> Genesis:
    """Build the candidate genesis for an already looked-up chain record."""
    chain_id = int(chain.chain_id)
    chain_config = chain_config_for(chain, registry)

    extra_data = BEDROCK_EXTRA_DATA
    if chain.genesis.extra_data is not None:
        extra_data = chain.genesis.extra_data
    if len(extra_data) > MAX_EXTRA_DATA_BYTES:
        raise ExtraDataTooLargeError(chain_id, len(extra_data), MAX_EXTRA_DATA_BYTES)

    # TODO: populate state allocations once the registry exports genesis allocs.
    genesis = Genesis(
        config=chain_config,
        timestamp=chain.genesis.l2_time,
        extra_data=extra_data,
        gas_limit=BEDROCK_GAS_LIMIT,
    )
    logger.debug("Built candidate genesis for chain %d at time %d", chain_id, genesis.timestamp)
    return genesis
