"""Chain configuration resolution for OP-Stack chains."""

from .config import ChainConfig, OptimismConfig
from .overrides import CHAIN_CONFIG_OVERRIDES, ChainConfigOverride
from .resolver import baseline_fields, chain_config_for, resolve_chain_config

__all__ = [
    "CHAIN_CONFIG_OVERRIDES",
    "ChainConfig",
    "ChainConfigOverride",
    "OptimismConfig",
    "baseline_fields",
    "chain_config_for",
    "resolve_chain_config",
]
