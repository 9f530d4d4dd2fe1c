"""
Registry records for superchain groups and the chains inside them.

Field names follow the snake_case keys of the registry's YAML export, so
records validate straight from `yaml.safe_load` output.
"""

from __future__ import annotations

from typing import Any

from pydantic import Field

from superchain_spec.types import Address, Bytes32, StrictBaseModel, Uint64


class GenesisMetadata(StrictBaseModel):
    """What the registry records about a chain's L2 genesis block."""

    l2_time: Uint64
    """Unix timestamp of the L2 genesis block."""

    l2_hash: Bytes32
    """
    The expected hash of the L2 genesis block.

    This is the single trust anchor for genesis construction: a built
    genesis is only released when it hashes to exactly this value.
    """

    extra_data: bytes | None = None
    """
    Explicit genesis extra-data, when the chain deviates from the default.

    Registry files spell this as a hex string; it is decoded before validation.
    """


class ChainMetadata(StrictBaseModel):
    """A single OP-Stack chain as listed in the registry."""

    name: str
    chain_id: Uint64
    superchain: str
    """Grouping key naming the superchain this chain belongs to."""

    genesis: GenesisMetadata
    system_config_addr: Address
    """Address of the chain's SystemConfig contract on L1."""


class SuperchainMetadata(StrictBaseModel):
    """A named cluster of chains that share an L1 and configuration ancestry."""

    name: str
    l1_chain_id: Uint64
    l1_rpc: str | None = None

    config: dict[str, Any] = Field(default_factory=dict)
    """
    Superchain-wide settings such as scheduled hardfork times.

    Carried as read; nothing here is applied to chain configs yet.
    """
