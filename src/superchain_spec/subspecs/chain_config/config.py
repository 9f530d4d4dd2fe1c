"""
Execution-layer chain configuration for OP-Stack chains.

A `ChainConfig` lists when every protocol upgrade activates on a chain.
Upgrades before the merge are keyed by block number; later ones by
timestamp. OP-Stack chains add two rollup upgrades of their own: Bedrock
(block-keyed) and Regolith (time-keyed).
"""

from __future__ import annotations

from typing import Final, Iterator, NamedTuple

from superchain_spec.types import ForkOrderError, StrictBaseModel, Uint64, Uint256

DEFAULT_EIP1559_ELASTICITY: Final = Uint64(6)
"""Default ratio between the gas limit and the gas target."""

DEFAULT_EIP1559_DENOMINATOR: Final = Uint64(50)
"""Default bound on how fast the base fee can change between blocks."""


class OptimismConfig(StrictBaseModel):
    """Fee-market parameters specific to OP-Stack chains."""

    eip1559_elasticity: Uint64
    eip1559_denominator: Uint64


class _Fork(NamedTuple):
    """One entry of the fork schedule, in activation order."""

    name: str
    activation: Uint64 | None
    is_time: bool
    optional: bool


class ChainConfig(StrictBaseModel):
    """
    The consensus parameters of a single chain.

    Field names mirror the execution client's genesis JSON (camelCase when
    serialized). Instances are immutable; resolvers build a fresh one on
    every call.
    """

    chain_id: Uint256

    homestead_block: Uint64 | None = None
    dao_fork_block: Uint64 | None = None
    dao_fork_support: bool = False
    eip150_block: Uint64 | None = None
    eip155_block: Uint64 | None = None
    eip158_block: Uint64 | None = None
    byzantium_block: Uint64 | None = None
    constantinople_block: Uint64 | None = None
    petersburg_block: Uint64 | None = None
    istanbul_block: Uint64 | None = None
    muir_glacier_block: Uint64 | None = None
    berlin_block: Uint64 | None = None
    london_block: Uint64 | None = None
    arrow_glacier_block: Uint64 | None = None
    gray_glacier_block: Uint64 | None = None
    merge_netsplit_block: Uint64 | None = None

    shanghai_time: Uint64 | None = None
    cancun_time: Uint64 | None = None
    prague_time: Uint64 | None = None

    bedrock_block: Uint64 | None = None
    """First block produced under the Bedrock rollup rules."""

    regolith_time: Uint64 | None = None
    """Timestamp at which the Regolith rollup upgrade activates."""

    terminal_total_difficulty: Uint256 | None = None
    """
    Total difficulty at which the chain switched to proof-of-stake.

    Rollups inherit an already-finalized L1 consensus, so they pin this
    to zero and mark it passed.
    """

    terminal_total_difficulty_passed: bool = False

    optimism: OptimismConfig | None = None

    def _fork_schedule(self) -> Iterator[_Fork]:
        """Yield every fork in the order it must activate."""
        yield _Fork("homesteadBlock", self.homestead_block, False, False)
        yield _Fork("daoForkBlock", self.dao_fork_block, False, True)
        yield _Fork("eip150Block", self.eip150_block, False, False)
        yield _Fork("eip155Block", self.eip155_block, False, False)
        yield _Fork("eip158Block", self.eip158_block, False, False)
        yield _Fork("byzantiumBlock", self.byzantium_block, False, False)
        yield _Fork("constantinopleBlock", self.constantinople_block, False, False)
        yield _Fork("petersburgBlock", self.petersburg_block, False, False)
        yield _Fork("istanbulBlock", self.istanbul_block, False, False)
        yield _Fork("muirGlacierBlock", self.muir_glacier_block, False, True)
        yield _Fork("berlinBlock", self.berlin_block, False, False)
        yield _Fork("londonBlock", self.london_block, False, False)
        yield _Fork("arrowGlacierBlock", self.arrow_glacier_block, False, True)
        yield _Fork("grayGlacierBlock", self.gray_glacier_block, False, True)
        yield _Fork("mergeNetsplitBlock", self.merge_netsplit_block, False, True)
        yield _Fork("bedrockBlock", self.bedrock_block, False, True)
        yield _Fork("regolithTime", self.regolith_time, True, True)
        yield _Fork("shanghaiTime", self.shanghai_time, True, True)
        yield _Fork("cancunTime", self.cancun_time, True, True)
        yield _Fork("pragueTime", self.prague_time, True, True)

    def check_fork_order(self) -> None:
        """
        Verify forks activate in their historical order.

        Rules:

        - A required fork that is unset may not be followed by a set fork.
        - Among forks of the same kind (block or time), activations never
          decrease.
        - Unset optional forks are skipped entirely.

        Raises:
            ForkOrderError: On the first violation found.
        """
        last: _Fork | None = None
        for fork in self._fork_schedule():
            if last is not None:
                if last.activation is None and fork.activation is not None:
                    raise ForkOrderError(
                        int(self.chain_id),
                        fork.name,
                        fork.activation,
                        previous_fork=last.name,
                        previous_activation=None,
                    )
                if (
                    last.activation is not None
                    and fork.activation is not None
                    and last.is_time == fork.is_time
                    and last.activation > fork.activation
                ):
                    raise ForkOrderError(
                        int(self.chain_id),
                        fork.name,
                        fork.activation,
                        previous_fork=last.name,
                        previous_activation=last.activation,
                    )
            if not fork.optional or fork.activation is not None:
                last = fork

    def is_london(self, block: int) -> bool:
        """Whether London rules apply at `block`."""
        return _is_active(self.london_block, block)

    def is_bedrock(self, block: int) -> bool:
        """Whether Bedrock rules apply at `block`."""
        return _is_active(self.bedrock_block, block)

    def is_regolith(self, time: int) -> bool:
        """Whether Regolith rules apply to a block with timestamp `time`."""
        return _is_active(self.regolith_time, time)

    def is_shanghai(self, time: int) -> bool:
        """Whether Shanghai rules apply to a block with timestamp `time`."""
        return _is_active(self.shanghai_time, time)


def _is_active(activation: Uint64 | None, head: int) -> bool:
    return activation is not None and activation <= head
