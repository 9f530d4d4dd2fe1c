"""Reusable type definitions for chain parameters and genesis blocks."""

from .base import CamelModel, StrictBaseModel
from .byte_arrays import (
    ZERO_ADDRESS,
    ZERO_HASH,
    Address,
    Bytes8,
    Bytes20,
    Bytes32,
    Bytes256,
)
from .exceptions import (
    ChainConfigError,
    ChainParamsError,
    ExtraDataTooLargeError,
    ForkOrderError,
    GenesisError,
    GenesisHashMismatchError,
    RegistryLookupError,
    UnknownChainError,
    UnknownSuperchainError,
)
from .uint import Uint64, Uint256

__all__ = [
    # Core types
    "Uint64",
    "Uint256",
    "Address",
    "Bytes8",
    "Bytes20",
    "Bytes32",
    "Bytes256",
    "ZERO_HASH",
    "ZERO_ADDRESS",
    "CamelModel",
    "StrictBaseModel",
    # Exceptions
    "ChainParamsError",
    "RegistryLookupError",
    "UnknownChainError",
    "UnknownSuperchainError",
    "ChainConfigError",
    "ForkOrderError",
    "GenesisError",
    "ExtraDataTooLargeError",
    "GenesisHashMismatchError",
]
