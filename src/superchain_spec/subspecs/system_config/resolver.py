"""
Locate a chain's SystemConfig contract.

Callers go through `SystemConfigAddressResolver` so the registry lookup can
later be swapped for deterministic address derivation without touching them.
"""

from __future__ import annotations

from typing import Protocol

from superchain_spec.subspecs.registry import RegistryAdapter, default_registry, require_chain
from superchain_spec.types import Address


class SystemConfigAddressResolver(Protocol):
    """Maps a chain ID to the address of its SystemConfig contract."""

    def system_config_address(self, chain_id: int) -> Address:
        """
        Return the address.

        Raises:
            UnknownChainError: If the chain is not known to the resolver.
        """
        ...


class RegistrySystemConfigResolver:
    """Reads SystemConfig addresses straight from registry metadata."""

    def __init__(self, registry: RegistryAdapter | None = None) -> None:
        self._registry = registry if registry is not None else default_registry()

    def system_config_address(self, chain_id: int) -> Address:
        return require_chain(self._registry, chain_id).system_config_addr


def resolve_system_config_address(
    chain_id: int, registry: RegistryAdapter | None = None
) -> Address:
    """
    Return the SystemConfig address registered for a chain.

    Raises:
        UnknownChainError: If the chain is not registered.
    """
    return RegistrySystemConfigResolver(registry).system_config_address(chain_id)
