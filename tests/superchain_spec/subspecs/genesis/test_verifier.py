"""Tests for genesis verification."""

from __future__ import annotations

import logging

import pytest

from superchain_spec import build_and_verify_genesis as public_build_and_verify_genesis
from superchain_spec.subspecs.genesis import (
    Genesis,
    KeccakGenesisHasher,
    VerifiedGenesis,
    build_and_verify_genesis,
    build_genesis,
    verify_genesis,
)
from superchain_spec.subspecs.registry import ChainMetadata, StaticRegistry, SuperchainMetadata
from superchain_spec.types import (
    ZERO_HASH,
    Bytes32,
    ExtraDataTooLargeError,
    GenesisHashMismatchError,
    UnknownChainError,
    Uint64,
)
from tests.superchain_spec.helpers import (
    CUSTOM_EXTRA_DATA_CHAIN_ID,
    DEVNET_CHAIN_ID,
    OVERSIZED_EXTRA_DATA_CHAIN_ID,
    UNREGISTERED_CHAIN_ID,
)


class _RecordingHasher:
    """Delegates to the keccak hasher and records every genesis it sees."""

    def __init__(self) -> None:
        self.calls: list[Genesis] = []

    def hash(self, genesis: Genesis) -> Bytes32:
        self.calls.append(genesis)
        return KeccakGenesisHasher().hash(genesis)


class _FixedHasher:
    def __init__(self, value: Bytes32) -> None:
        self.value = value

    def hash(self, genesis: Genesis) -> Bytes32:
        return self.value


class _CountingRegistry:
    """Wraps a registry and counts chain lookups."""

    def __init__(self, inner: StaticRegistry) -> None:
        self.inner = inner
        self.chain_lookups = 0

    def get_chain_metadata(self, chain_id: int) -> ChainMetadata | None:
        self.chain_lookups += 1
        return self.inner.get_chain_metadata(chain_id)

    def get_superchain_metadata(self, name: str) -> SuperchainMetadata | None:
        return self.inner.get_superchain_metadata(name)


def _expected_hash(registry: StaticRegistry, chain_id: int) -> Bytes32:
    chain = registry.get_chain_metadata(chain_id)
    assert chain is not None
    return chain.genesis.l2_hash


class TestVerifyGenesis:
    """Tests for verify_genesis()."""

    def test_match_returns_verified(self, verified_registry: StaticRegistry) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, verified_registry)
        expected = _expected_hash(verified_registry, DEVNET_CHAIN_ID)

        verified = verify_genesis(genesis, expected, chain_id=DEVNET_CHAIN_ID)

        assert isinstance(verified, VerifiedGenesis)
        assert verified.genesis is genesis
        assert verified.block_hash == expected

    def test_mutated_gas_limit_is_rejected(self, verified_registry: StaticRegistry) -> None:
        """Changing one header field breaks an otherwise known-good hash."""
        genesis = build_genesis(DEVNET_CHAIN_ID, verified_registry)
        expected = _expected_hash(verified_registry, DEVNET_CHAIN_ID)
        mutated = genesis.copy(gas_limit=Uint64(29_999_999))

        with pytest.raises(GenesisHashMismatchError) as exc_info:
            verify_genesis(mutated, expected, chain_id=DEVNET_CHAIN_ID)

        err = exc_info.value
        assert err.chain_id == DEVNET_CHAIN_ID
        assert err.expected == expected
        assert err.computed == KeccakGenesisHasher().hash(mutated)
        assert err.computed != err.expected
        assert expected.hex() in str(err)

    def test_mismatch_is_logged(
        self, verified_registry: StaticRegistry, caplog: pytest.LogCaptureFixture
    ) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, verified_registry)

        with caplog.at_level(logging.WARNING), pytest.raises(GenesisHashMismatchError):
            verify_genesis(genesis, ZERO_HASH, chain_id=DEVNET_CHAIN_ID)

        assert "Genesis hash mismatch for chain 901" in caplog.text

    def test_uses_supplied_hasher(self, registry: StaticRegistry) -> None:
        genesis = build_genesis(DEVNET_CHAIN_ID, registry)
        value = Bytes32(b"\x07" * 32)

        verified = verify_genesis(
            genesis, value, chain_id=DEVNET_CHAIN_ID, hasher=_FixedHasher(value)
        )
        assert verified.block_hash == value


class TestBuildAndVerifyGenesis:
    """Tests for the composed build-then-verify operation."""

    def test_success(self, verified_registry: StaticRegistry) -> None:
        verified = build_and_verify_genesis(DEVNET_CHAIN_ID, verified_registry)

        assert verified.block_hash == _expected_hash(verified_registry, DEVNET_CHAIN_ID)
        assert verified.genesis == build_genesis(DEVNET_CHAIN_ID, verified_registry)

    def test_success_with_extra_data_override(self, verified_registry: StaticRegistry) -> None:
        verified = build_and_verify_genesis(CUSTOM_EXTRA_DATA_CHAIN_ID, verified_registry)
        assert verified.genesis.extra_data == b"\x02" * 32

    def test_exported_from_package_root(self, verified_registry: StaticRegistry) -> None:
        verified = public_build_and_verify_genesis(DEVNET_CHAIN_ID, verified_registry)
        assert verified.block_hash == _expected_hash(verified_registry, DEVNET_CHAIN_ID)

    def test_wrong_expected_hash(self, registry: StaticRegistry) -> None:
        with pytest.raises(GenesisHashMismatchError) as exc_info:
            build_and_verify_genesis(DEVNET_CHAIN_ID, registry)
        assert exc_info.value.expected == ZERO_HASH

    def test_size_check_precedes_hashing(self, registry: StaticRegistry) -> None:
        hasher = _RecordingHasher()
        with pytest.raises(ExtraDataTooLargeError):
            build_and_verify_genesis(OVERSIZED_EXTRA_DATA_CHAIN_ID, registry, hasher)
        assert hasher.calls == []

    def test_hasher_called_once_on_success(self, verified_registry: StaticRegistry) -> None:
        hasher = _RecordingHasher()
        build_and_verify_genesis(DEVNET_CHAIN_ID, verified_registry, hasher)
        assert len(hasher.calls) == 1

    def test_chain_looked_up_once(self, verified_registry: StaticRegistry) -> None:
        counting = _CountingRegistry(verified_registry)
        build_and_verify_genesis(DEVNET_CHAIN_ID, counting)
        assert counting.chain_lookups == 1

    def test_unknown_chain(self, registry: StaticRegistry) -> None:
        hasher = _RecordingHasher()
        with pytest.raises(UnknownChainError):
            build_and_verify_genesis(UNREGISTERED_CHAIN_ID, registry, hasher)
        assert hasher.calls == []

    def test_bundled_chain_without_state_is_rejected(self) -> None:
        """OP Mainnet's real genesis allocates state, so the gate must not pass it."""
        with pytest.raises(GenesisHashMismatchError) as exc_info:
            build_and_verify_genesis(10)
        assert exc_info.value.expected == Bytes32(
            "0x7ca38a1916c42007829c55e69d3e9a73265554b586a499015373241b8a3fa48b"
        )
