"""Resolve the chain configuration of a registered OP-Stack chain."""

from __future__ import annotations

import logging
from typing import Any, Final

from superchain_spec.subspecs.registry import (
    ChainMetadata,
    RegistryAdapter,
    default_registry,
    require_chain,
)
from superchain_spec.types import UnknownSuperchainError, Uint64, Uint256

from .config import (
    DEFAULT_EIP1559_DENOMINATOR,
    DEFAULT_EIP1559_ELASTICITY,
    ChainConfig,
    OptimismConfig,
)
from .overrides import CHAIN_CONFIG_OVERRIDES

logger = logging.getLogger(__name__)

GENESIS_ACTIVATION: Final = Uint64(0)
"""Activation point meaning "active from the genesis block"."""


def baseline_fields(chain_id: int) -> dict[str, Any]:
    """
    The configuration every OP-Stack chain starts from.

    Every Ethereum fork up to and including Bedrock is active at genesis,
    Regolith is active at genesis time, and the chain is already past the
    terminal total difficulty. Time-keyed forks after the merge stay
    unscheduled.
    """
    return {
        "chain_id": Uint256(chain_id),
        "homestead_block": GENESIS_ACTIVATION,
        "dao_fork_block": None,
        "dao_fork_support": False,
        "eip150_block": GENESIS_ACTIVATION,
        "eip155_block": GENESIS_ACTIVATION,
        "eip158_block": GENESIS_ACTIVATION,
        "byzantium_block": GENESIS_ACTIVATION,
        "constantinople_block": GENESIS_ACTIVATION,
        "petersburg_block": GENESIS_ACTIVATION,
        "istanbul_block": GENESIS_ACTIVATION,
        "muir_glacier_block": GENESIS_ACTIVATION,
        "berlin_block": GENESIS_ACTIVATION,
        "london_block": GENESIS_ACTIVATION,
        "arrow_glacier_block": GENESIS_ACTIVATION,
        "gray_glacier_block": GENESIS_ACTIVATION,
        "merge_netsplit_block": GENESIS_ACTIVATION,
        "shanghai_time": None,
        "cancun_time": None,
        "prague_time": None,
        "bedrock_block": GENESIS_ACTIVATION,
        "regolith_time": GENESIS_ACTIVATION,
        "terminal_total_difficulty": Uint256(0),
        "terminal_total_difficulty_passed": True,
        "optimism": OptimismConfig(
            eip1559_elasticity=DEFAULT_EIP1559_ELASTICITY,
            eip1559_denominator=DEFAULT_EIP1559_DENOMINATOR,
        ),
    }


def resolve_chain_config(chain_id: int, registry: RegistryAdapter | None = None) -> ChainConfig:
    """
    Build the chain configuration for a registered chain.

    Args:
        chain_id: The chain to resolve.
        registry: Where to look the chain up. Defaults to the process-wide registry.

    Raises:
        UnknownChainError: If the chain is not registered.
        UnknownSuperchainError: If the chain's superchain group is not registered.
        ForkOrderError: If an override leaves forks out of order.
    """
    if registry is None:
        registry = default_registry()
    return chain_config_for(require_chain(registry, chain_id), registry)


def chain_config_for(chain: ChainMetadata, registry: RegistryAdapter) -> ChainConfig:
    """
    Build the chain configuration for an already looked-up chain record.

    Raises:
        UnknownSuperchainError: If the chain's superchain group is not registered.
        ForkOrderError: If an override leaves forks out of order.
    """
    chain_id = int(chain.chain_id)

    superchain = registry.get_superchain_metadata(chain.superchain)
    if superchain is None:
        raise UnknownSuperchainError(chain_id, chain.superchain)

    # Superchain-wide upgrade schedules are carried by the registry but not
    # applied here yet; every chain gets the same baseline.
    fields = baseline_fields(chain_id)

    override = CHAIN_CONFIG_OVERRIDES.get(chain_id)
    if override is not None:
        logger.debug("Applying chain config override for chain %d", chain_id)
        fields = override.apply(fields)

    chain_config = ChainConfig(**fields)
    chain_config.check_fork_order()

    logger.debug("Resolved chain config for %s (chain %d)", chain.name, chain_id)
    return chain_config
