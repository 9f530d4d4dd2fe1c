"""
Per-chain corrections to the baseline chain configuration.

Chains launched before the unified OP-Stack activation scheme ran real
upgrades at real block heights. Their entries here record those heights
in place of the genesis-block defaults. Adding a chain is a data change:
add an entry to `CHAIN_CONFIG_OVERRIDES`.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Final, Mapping

from superchain_spec.types import StrictBaseModel, Uint64

OP_MAINNET_CHAIN_ID: Final = 10
OP_GOERLI_CHAIN_ID: Final = 420
BASE_GOERLI_CHAIN_ID: Final = 84531

OP_MAINNET_BEDROCK_BLOCK: Final = Uint64(105_235_063)
"""Height at which OP Mainnet migrated to Bedrock."""

OP_GOERLI_BEDROCK_BLOCK: Final = Uint64(4_061_224)
"""Height at which OP Goerli migrated to Bedrock."""

OP_GOERLI_REGOLITH_TIME: Final = Uint64(1_679_079_600)
BASE_GOERLI_REGOLITH_TIME: Final = Uint64(1_683_219_600)


class ChainConfigOverride(StrictBaseModel):
    """
    A declarative patch over the baseline chain configuration.

    Only fields set explicitly take part. Each one replaces the baseline
    value wholesale; nothing is merged.
    """

    berlin_block: Uint64 | None = None
    london_block: Uint64 | None = None
    arrow_glacier_block: Uint64 | None = None
    gray_glacier_block: Uint64 | None = None
    merge_netsplit_block: Uint64 | None = None
    bedrock_block: Uint64 | None = None
    regolith_time: Uint64 | None = None
    eip1559_elasticity: Uint64 | None = None

    def apply(self, fields: Mapping[str, Any]) -> dict[str, Any]:
        """
        Return a new field mapping with this patch applied.

        `fields` is the keyword set a `ChainConfig` is constructed from; it is
        not modified.
        """
        patch = self.model_dump(exclude_unset=True)
        elasticity = patch.pop("eip1559_elasticity", None)

        patched = dict(fields) | patch
        if elasticity is not None:
            patched["optimism"] = patched["optimism"].copy(eip1559_elasticity=elasticity)
        return patched


def _historical_upgrades_at(block: Uint64) -> dict[str, Uint64]:
    """London through Bedrock, all landing together at the migration block."""
    return {
        "london_block": block,
        "arrow_glacier_block": block,
        "gray_glacier_block": block,
        "merge_netsplit_block": block,
        "bedrock_block": block,
    }


CHAIN_CONFIG_OVERRIDES: Final[Mapping[int, ChainConfigOverride]] = MappingProxyType(
    {
        OP_GOERLI_CHAIN_ID: ChainConfigOverride(
            **_historical_upgrades_at(OP_GOERLI_BEDROCK_BLOCK),
            regolith_time=OP_GOERLI_REGOLITH_TIME,
            eip1559_elasticity=Uint64(10),
        ),
        OP_MAINNET_CHAIN_ID: ChainConfigOverride(
            berlin_block=Uint64(3_950_000),
            **_historical_upgrades_at(OP_MAINNET_BEDROCK_BLOCK),
        ),
        BASE_GOERLI_CHAIN_ID: ChainConfigOverride(
            regolith_time=BASE_GOERLI_REGOLITH_TIME,
        ),
    }
)
"""Overrides keyed by chain ID. Chains without an entry keep the baseline."""
