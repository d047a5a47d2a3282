"""Configuration handling for license-resolver."""
from __future__ import annotations

from license_resolver.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_resolver.config.loader import (
    apply_credentials,
    find_config_file,
    load_config,
    load_config_file,
)
from license_resolver.models.config import ResolverConfig

__all__ = [
    "DEFAULT_CONFIG_NAMES",
    "ResolverConfig",
    "apply_credentials",
    "find_config_file",
    "get_default_config",
    "load_config",
    "load_config_file",
]
