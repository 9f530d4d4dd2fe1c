"""
Global configuration for chain parameter resolution.

This module contains environment-specific settings that apply across all subspecs.
"""

import os
from pathlib import Path

_BUNDLED_REGISTRY_DIR = Path(__file__).parent / "subspecs" / "registry" / "data"

_registry_dir_env = os.environ.get("SUPERCHAIN_REGISTRY_DIR")

SUPERCHAIN_REGISTRY_DIR = Path(_registry_dir_env) if _registry_dir_env else _BUNDLED_REGISTRY_DIR
"""
Directory holding `superchains.yaml` and `chains.yaml`.

Defaults to the snapshot shipped with the package. Point it elsewhere to
resolve chains from a newer registry export without reinstalling.
"""

if not SUPERCHAIN_REGISTRY_DIR.is_dir():
    raise ValueError(
        f"Invalid SUPERCHAIN_REGISTRY_DIR environment variable: '{_registry_dir_env}'. "
        "It must name an existing directory."
    )
