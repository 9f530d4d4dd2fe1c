"""
Read-only access to the superchain registry.

The registry is an immutable in-memory dataset. It is loaded once per
process from YAML and never mutated, so lookups from any number of threads
need no locking.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterable, Mapping, Protocol

import yaml

from superchain_spec import config
from superchain_spec.types import UnknownChainError

from .models import ChainMetadata, SuperchainMetadata

logger = logging.getLogger(__name__)

SUPERCHAINS_FILE = "superchains.yaml"
"""File listing superchain groups inside a registry directory."""

CHAINS_FILE = "chains.yaml"
"""File listing chains inside a registry directory."""


class RegistryAdapter(Protocol):
    """Lookups the resolvers need from a registry."""

    def get_chain_metadata(self, chain_id: int) -> ChainMetadata | None:
        """Return the chain's record, or None if it is not registered."""
        ...

    def get_superchain_metadata(self, name: str) -> SuperchainMetadata | None:
        """Return the superchain group's record, or None if it is not registered."""
        ...


@dataclass(frozen=True, slots=True)
class StaticRegistry:
    """
    A registry snapshot held entirely in memory.

    Both mappings are wrapped read-only at construction time.
    """

    chains: Mapping[int, ChainMetadata]
    superchains: Mapping[str, SuperchainMetadata]

    def __post_init__(self) -> None:
        object.__setattr__(self, "chains", MappingProxyType(dict(self.chains)))
        object.__setattr__(self, "superchains", MappingProxyType(dict(self.superchains)))

    def get_chain_metadata(self, chain_id: int) -> ChainMetadata | None:
        return self.chains.get(chain_id)

    def get_superchain_metadata(self, name: str) -> SuperchainMetadata | None:
        return self.superchains.get(name)

    @classmethod
    def from_records(
        cls,
        chains: Iterable[ChainMetadata],
        superchains: Iterable[SuperchainMetadata],
    ) -> StaticRegistry:
        """
        Index records by chain ID and superchain name.

        Raises:
            ValueError: If a chain ID or superchain name appears twice.
        """
        chain_index: dict[int, ChainMetadata] = {}
        for chain in chains:
            if chain.chain_id in chain_index:
                raise ValueError(f"duplicate chain ID in registry: {chain.chain_id}")
            chain_index[int(chain.chain_id)] = chain

        superchain_index: dict[str, SuperchainMetadata] = {}
        for superchain in superchains:
            if superchain.name in superchain_index:
                raise ValueError(f"duplicate superchain in registry: {superchain.name!r}")
            superchain_index[superchain.name] = superchain

        return cls(chains=chain_index, superchains=superchain_index)

    @classmethod
    def from_yaml(cls, chains_content: str, superchains_content: str) -> StaticRegistry:
        """
        Load a registry from YAML strings.

        Useful for testing or programmatic registry construction.
        """
        return cls.from_records(
            chains=[_parse_chain(entry) for entry in _load_list(chains_content, "chains")],
            superchains=[
                SuperchainMetadata.model_validate(entry)
                for entry in _load_list(superchains_content, "superchains")
            ],
        )

    @classmethod
    def from_directory(cls, path: Path | str) -> StaticRegistry:
        """
        Load a registry from a directory holding the two registry files.

        Raises:
            FileNotFoundError: If either file does not exist.
            yaml.YAMLError: If a file is not valid YAML.
            pydantic.ValidationError: If a record fails validation.
            ValueError: If the files are structurally wrong or hold duplicates.
        """
        path = Path(path)
        registry = cls.from_yaml(
            (path / CHAINS_FILE).read_text(encoding="utf-8"),
            (path / SUPERCHAINS_FILE).read_text(encoding="utf-8"),
        )
        logger.debug(
            "Loaded registry from %s: %d chains, %d superchains",
            path,
            len(registry.chains),
            len(registry.superchains),
        )
        return registry


def _load_list(content: str, key: str) -> list[Any]:
    """Parse a YAML document of the form `{key: [...]}`."""
    data = yaml.safe_load(content)
    if not isinstance(data, dict) or not isinstance(data.get(key), list):
        raise ValueError(f"registry document must hold a top-level '{key}' list")
    return data[key]


def _parse_chain(entry: Any) -> ChainMetadata:
    """
    Validate one chain record.

    YAML gives hex strings for extra-data; the strict model wants bytes.
    """
    if isinstance(entry, dict) and isinstance(entry.get("genesis"), dict):
        extra_data = entry["genesis"].get("extra_data")
        if isinstance(extra_data, str):
            genesis = entry["genesis"] | {"extra_data": bytes.fromhex(extra_data.removeprefix("0x"))}
            entry = entry | {"genesis": genesis}
    return ChainMetadata.model_validate(entry)


@cache
def default_registry() -> StaticRegistry:
    """
    Return the process-wide registry snapshot.

    Loaded from `SUPERCHAIN_REGISTRY_DIR` on first use and shared afterwards.
    """
    return StaticRegistry.from_directory(config.SUPERCHAIN_REGISTRY_DIR)


def require_chain(registry: RegistryAdapter, chain_id: int) -> ChainMetadata:
    """
    Return the chain's record.

    Raises:
        UnknownChainError: If the chain is not registered.
    """
    chain = registry.get_chain_metadata(chain_id)
    if chain is None:
        raise UnknownChainError(chain_id)
    return chain
