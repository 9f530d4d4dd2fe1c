"""
Execution-layer block headers and how a genesis descriptor becomes one.

The header is the unit that gets hashed: a block's hash is
keccak-256 over the RLP encoding of its header fields.
"""

from __future__ import annotations

from typing import Final

from Crypto.Hash import keccak
from pydantic import model_validator

from superchain_spec.types import (
    Address,
    Bytes8,
    Bytes32,
    Bytes256,
    StrictBaseModel,
    Uint64,
    Uint256,
)
from superchain_spec.types.rlp import RLPItem, encode_rlp

from .genesis import Genesis


def keccak256(data: bytes) -> Bytes32:
    """Return the keccak-256 digest of `data`."""
    k = keccak.new(digest_bits=256)
    k.update(data)
    return Bytes32(k.digest())


EMPTY_ROOT_HASH: Final = Bytes32(
    "0x56e81f171bcc55a6ff8345e692c0f86e5b48e01b996cadc001622fb5e363b421"
)
"""Root of an empty Merkle-Patricia trie: keccak256(rlp(b""))."""

EMPTY_OMMERS_HASH: Final = Bytes32(
    "0x1dcc4de8dec75d7aab85b567b6ccd41ad312451b948a7413f0a142fd40d49347"
)
"""Hash of an empty ommers list: keccak256(rlp([]))."""

EMPTY_BLOOM: Final = Bytes256.zero()

GENESIS_GAS_LIMIT: Final = Uint64(5_000)
"""Gas limit used when a genesis leaves it at zero."""

GENESIS_DIFFICULTY: Final = Uint256(131_072)
"""Difficulty used when a genesis sets neither difficulty nor mix hash."""

INITIAL_BASE_FEE: Final = Uint256(1_000_000_000)
"""Base fee of the first London block when none is given."""


class BlockHeader(StrictBaseModel):
    """
    An execution-layer block header.

    Fields appear in their RLP order. The two trailing fields only exist
    once the matching fork is active: `base_fee` from London and
    `withdrawals_root` from Shanghai.
    """

    parent_hash: Bytes32
    ommers_hash: Bytes32
    coinbase: Address
    state_root: Bytes32
    transactions_root: Bytes32
    receipts_root: Bytes32
    logs_bloom: Bytes256
    difficulty: Uint256
    number: Uint256
    gas_limit: Uint64
    gas_used: Uint64
    timestamp: Uint64
    extra_data: bytes
    mix_hash: Bytes32
    nonce: Bytes8
    base_fee: Uint256 | None = None
    withdrawals_root: Bytes32 | None = None

    @model_validator(mode="after")
    def validate_optional_fields(self) -> BlockHeader:
        """A withdrawals root without a base fee has no valid encoding."""
        if self.withdrawals_root is not None and self.base_fee is None:
            raise ValueError("withdrawals_root requires base_fee to be set")
        return self

    def to_rlp(self) -> list[RLPItem]:
        """Lay the header out as the RLP list that gets hashed."""
        fields: list[RLPItem] = [
            bytes(self.parent_hash),
            bytes(self.ommers_hash),
            bytes(self.coinbase),
            bytes(self.state_root),
            bytes(self.transactions_root),
            bytes(self.receipts_root),
            bytes(self.logs_bloom),
            self.difficulty.to_be_bytes(),
            self.number.to_be_bytes(),
            self.gas_limit.to_be_bytes(),
            self.gas_used.to_be_bytes(),
            self.timestamp.to_be_bytes(),
            self.extra_data,
            bytes(self.mix_hash),
            bytes(self.nonce),
        ]
        if self.base_fee is not None:
            fields.append(self.base_fee.to_be_bytes())
        if self.withdrawals_root is not None:
            fields.append(bytes(self.withdrawals_root))
        return fields

    def encode(self) -> bytes:
        """Return the header's canonical RLP encoding."""
        return encode_rlp(self.to_rlp())

    def block_hash(self) -> Bytes32:
        """Return the hash identifying the block this header belongs to."""
        return keccak256(self.encode())

    @classmethod
    def from_genesis(cls, genesis: Genesis) -> BlockHeader:
        """
        Derive the genesis block header the way an execution client does.

        - A zero gas limit falls back to `GENESIS_GAS_LIMIT`.
        - Unset difficulty with a zero mix hash falls back to `GENESIS_DIFFICULTY`.
        - London active at block 0 adds a base fee (`INITIAL_BASE_FEE` if unset).
        - Shanghai active at the genesis timestamp adds the empty withdrawals root.
        - The genesis carries no transactions, receipts or ommers, and its
          state is unpopulated, so every root is the empty one.
        """
        gas_limit = genesis.gas_limit if genesis.gas_limit != 0 else GENESIS_GAS_LIMIT

        difficulty = genesis.difficulty
        if difficulty is None:
            difficulty = GENESIS_DIFFICULTY if genesis.mix_hash == bytes(32) else Uint256(0)

        base_fee = None
        if genesis.config.is_london(0):
            base_fee = genesis.base_fee if genesis.base_fee is not None else INITIAL_BASE_FEE

        withdrawals_root = None
        if genesis.config.is_shanghai(genesis.timestamp):
            withdrawals_root = EMPTY_ROOT_HASH

        return cls(
            parent_hash=genesis.parent_hash,
            ommers_hash=EMPTY_OMMERS_HASH,
            coinbase=genesis.coinbase,
            state_root=EMPTY_ROOT_HASH,
            transactions_root=EMPTY_ROOT_HASH,
            receipts_root=EMPTY_ROOT_HASH,
            logs_bloom=EMPTY_BLOOM,
            difficulty=difficulty,
            number=Uint256(genesis.number),
            gas_limit=gas_limit,
            gas_used=genesis.gas_used,
            timestamp=genesis.timestamp,
            extra_data=genesis.extra_data,
            mix_hash=genesis.mix_hash,
            nonce=Bytes8(genesis.nonce.to_bytes(8, "big")),
            base_fee=base_fee,
            withdrawals_root=withdrawals_root,
        )
