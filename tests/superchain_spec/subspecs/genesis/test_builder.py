"""Tests for build_genesis()."""

from __future__ import annotations

import pytest

from superchain_spec.subspecs.chain_config import resolve_chain_config
from superchain_spec.subspecs.genesis import (
    BEDROCK_EXTRA_DATA,
    BEDROCK_GAS_LIMIT,
    MAX_EXTRA_DATA_BYTES,
    build_genesis,
)
from superchain_spec.subspecs.registry import ChainMetadata, StaticRegistry, SuperchainMetadata
from superchain_spec.types import (
    ZERO_ADDRESS,
    ZERO_HASH,
    ExtraDataTooLargeError,
    UnknownChainError,
    UnknownSuperchainError,
)
from tests.superchain_spec.helpers import (
    CUSTOM_EXTRA_DATA_CHAIN_ID,
    DEVNET_CHAIN_ID,
    DEVNET_GENESIS_TIME,
    ORPHAN_CHAIN_ID,
    OVERSIZED_EXTRA_DATA_CHAIN_ID,
    UNREGISTERED_CHAIN_ID,
)


class TestHeaderFields:
    """Tests for the fields of a built genesis."""

    def test_registry_and_fixed_fields(self, registry: StaticRegistry) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, registry)

        assert genesis.timestamp == DEVNET_GENESIS_TIME
        assert genesis.extra_data == BEDROCK_EXTRA_DATA == b"BEDROCK"
        assert genesis.gas_limit == BEDROCK_GAS_LIMIT == 30_000_000

    def test_other_fields_zero(self, registry: StaticRegistry) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, registry)

        assert genesis.nonce == 0
        assert genesis.number == 0
        assert genesis.gas_used == 0
        assert genesis.mix_hash == ZERO_HASH
        assert genesis.parent_hash == ZERO_HASH
        assert genesis.coinbase == ZERO_ADDRESS
        assert genesis.difficulty is None
        assert genesis.base_fee is None
        assert genesis.alloc is None

    def test_config_is_resolved_config(self, registry: StaticRegistry) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, registry)
        assert genesis.config == resolve_chain_config(DEVNET_CHAIN_ID, registry)


class TestExtraData:
    """Tests for extra-data selection and its size limit."""

    def test_registry_override_substituted(self, registry: StaticRegistry) -> None:
        genesis = build_genesis(CUSTOM_EXTRA_DATA_CHAIN_ID, registry)
        assert genesis.extra_data == b"\x02" * MAX_EXTRA_DATA_BYTES

    def test_oversized_rejected(self, registry: StaticRegistry) -> None:
        with pytest.raises(ExtraDataTooLargeError) as exc_info:
            build_genesis(OVERSIZED_EXTRA_DATA_CHAIN_ID, registry)

        err = exc_info.value
        assert err.chain_id == OVERSIZED_EXTRA_DATA_CHAIN_ID
        assert err.size == 33
        assert err.limit == 32
        assert "32 bytes or less" in str(err)


class TestResolverErrors:
    """Resolver errors surface unchanged."""

    def test_unknown_chain(self, registry: StaticRegistry) -> None:
        with pytest.raises(UnknownChainError):
            build_genesis(UNREGISTERED_CHAIN_ID, registry)

    def test_unknown_superchain(self, registry: StaticRegistry) -> None:
        with pytest.raises(UnknownSuperchainError):
            build_genesis(ORPHAN_CHAIN_ID, registry)


def test_chain_looked_up_once(registry: StaticRegistry) -> None:
    lookups: list[int] = []

    class _Counting:
        def get_chain_metadata(self, chain_id: int) -> ChainMetadata | None:
            lookups.append(chain_id)
            return registry.get_chain_metadata(chain_id)

        def get_superchain_metadata(self, name: str) -> SuperchainMetadata | None:
            return registry.get_superchain_metadata(name)

    build_genesis(DEVNET_CHAIN_ID, _Counting())
    assert lookups == [DEVNET_CHAIN_ID]
