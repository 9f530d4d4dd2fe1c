"""
Shared pytest fixtures for all superchain_spec tests.

Provides small in-memory registries so tests never depend on the bundled
registry snapshot unless they mean to.
"""

from __future__ import annotations

from collections.abc import Callable

import pytest

from superchain_spec.subspecs.genesis import KeccakGenesisHasher, build_genesis
from superchain_spec.subspecs.registry import (
    ChainMetadata,
    GenesisMetadata,
    StaticRegistry,
)
from superchain_spec.types import ZERO_HASH, Address, Uint64
from tests.superchain_spec.helpers import (
    CUSTOM_EXTRA_DATA_CHAIN_ID,
    DEVNET_CHAIN_ID,
    DEVNET_GENESIS_TIME,
    OP_MAINNET_CHAIN_ID,
    ORPHAN_CHAIN_ID,
    OVERSIZED_EXTRA_DATA_CHAIN_ID,
    TEST_SUPERCHAIN,
)


@pytest.fixture
def chain_factory() -> Callable[..., ChainMetadata]:
    """Factory for chain records with overridable fields."""

    def _make(
        chain_id: int,
        *,
        superchain: str = "testnet",
        l2_time: Uint64 = DEVNET_GENESIS_TIME,
        l2_hash: bytes = ZERO_HASH,
        extra_data: bytes | None = None,
        system_config_addr: Address | None = None,
    ) -> ChainMetadata:
        return ChainMetadata(
            name=f"chain-{chain_id}",
            chain_id=Uint64(chain_id),
            superchain=superchain,
            genesis=GenesisMetadata(l2_time=l2_time, l2_hash=l2_hash, extra_data=extra_data),
            system_config_addr=(
                system_config_addr
                if system_config_addr is not None
                else Address(chain_id.to_bytes(20, "big"))
            ),
        )

    return _make


@pytest.fixture
def registry(chain_factory: Callable[..., ChainMetadata]) -> StaticRegistry:
    """A registry whose expected genesis hashes are all zero."""
    return StaticRegistry.from_records(
        chains=[
            chain_factory(DEVNET_CHAIN_ID),
            chain_factory(ORPHAN_CHAIN_ID, superchain="missing"),
            chain_factory(OVERSIZED_EXTRA_DATA_CHAIN_ID, extra_data=b"\x01" * 33),
            chain_factory(CUSTOM_EXTRA_DATA_CHAIN_ID, extra_data=b"\x02" * 32),
            chain_factory(OP_MAINNET_CHAIN_ID),
        ],
        superchains=[TEST_SUPERCHAIN],
    )


@pytest.fixture
def verified_registry(
    registry: StaticRegistry, chain_factory: Callable[..., ChainMetadata]
) -> StaticRegistry:
    """
    A registry whose devnet entry records the genesis hash it really produces.

    The hash is taken from a genesis built against `registry`, which differs
    only in the expected hash, so the recorded value is known-good.
    """
    hasher = KeccakGenesisHasher()
    devnet_hash = hasher.hash(build_genesis(DEVNET_CHAIN_ID, registry))
    custom_hash = hasher.hash(build_genesis(CUSTOM_EXTRA_DATA_CHAIN_ID, registry))
    return StaticRegistry.from_records(
        chains=[
            chain_factory(DEVNET_CHAIN_ID, l2_hash=devnet_hash),
            chain_factory(CUSTOM_EXTRA_DATA_CHAIN_ID, extra_data=b"\x02" * 32, l2_hash=custom_hash),
        ],
        superchains=[TEST_SUPERCHAIN],
    )
