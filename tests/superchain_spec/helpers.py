"""Chain IDs and values shared by the fixture registries."""

from superchain_spec.subspecs.registry import SuperchainMetadata
from superchain_spec.types import Uint64

DEVNET_CHAIN_ID = 901
"""A chain with no override entry."""

ORPHAN_CHAIN_ID = 902
"""A chain whose superchain group is missing from the registry."""

OVERSIZED_EXTRA_DATA_CHAIN_ID = 903
"""A chain whose registered extra-data is one byte over the limit."""

CUSTOM_EXTRA_DATA_CHAIN_ID = 904
"""A chain with a registered extra-data of exactly 32 bytes."""

OP_MAINNET_CHAIN_ID = 10
"""A chain with a historical override entry."""

UNREGISTERED_CHAIN_ID = 999_999
"""A chain ID no fixture registry holds."""

DEVNET_GENESIS_TIME = Uint64(1_700_000_000)

TEST_SUPERCHAIN = SuperchainMetadata(name="testnet", l1_chain_id=Uint64(900))
