"""
Chain parameters and verified genesis blocks for OP-Stack superchain chains.

The three entry points:

- `resolve_chain_config`: fork activations and fee parameters of a chain.
- `build_and_verify_genesis`: the chain's genesis, released only after its
  hash matches the registry.
- `resolve_system_config_address`: the chain's SystemConfig contract.
"""

from .subspecs.chain_config import ChainConfig, resolve_chain_config
from .subspecs.genesis import Genesis, VerifiedGenesis, build_and_verify_genesis
from .subspecs.system_config import resolve_system_config_address

__all__ = [
    "ChainConfig",
    "Genesis",
    "VerifiedGenesis",
    "build_and_verify_genesis",
    "resolve_chain_config",
    "resolve_system_config_address",
]
