"""Read-only access to the superchain registry."""

from .adapter import RegistryAdapter, StaticRegistry, default_registry, require_chain
from .models import ChainMetadata, GenesisMetadata, SuperchainMetadata

__all__ = [
    "ChainMetadata",
    "GenesisMetadata",
    "RegistryAdapter",
    "StaticRegistry",
    "SuperchainMetadata",
    "default_registry",
    "require_chain",
]
