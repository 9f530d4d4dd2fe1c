"""SystemConfig contract address resolution."""

from .resolver import (
    RegistrySystemConfigResolver,
    SystemConfigAddressResolver,
    resolve_system_config_address,
)

__all__ = [
    "RegistrySystemConfigResolver",
    "SystemConfigAddressResolver",
    "resolve_system_config_address",
]
