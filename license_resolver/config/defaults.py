"""Default configuration values for license-resolver."""

from __future__ import annotations

from license_resolver.models.config import ResolverConfig

# Default configuration file names to search for
DEFAULT_CONFIG_NAMES = [".license-resolver.yaml", ".license-resolver.yml"]


def get_default_config() -> ResolverConfig:
    """Get the default configuration.

    Returns:
        ResolverConfig with anonymous access to the public GitHub API.
    """
    return ResolverConfig()
