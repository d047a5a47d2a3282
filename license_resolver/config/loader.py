"""Load resolver settings from `.license-resolver.yaml`."""
from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import ValidationError

from license_resolver.config.defaults import DEFAULT_CONFIG_NAMES, get_default_config
from license_resolver.exceptions import ConfigurationError
from license_resolver.models.config import ResolverConfig


def find_config_file(start_dir: Path | None = None) -> Path | None:
    """Return the first of DEFAULT_CONFIG_NAMES present in start_dir (or cwd)."""
    search_dir = start_dir or Path.cwd()
    candidates = (search_dir / name for name in DEFAULT_CONFIG_NAMES)
    return next((path for path in candidates if path.exists()), None)


def load_config_file(path: Path) -> ResolverConfig:
    """Parse and validate a resolver configuration file.

    Empty or comment-only files yield the default (anonymous) configuration.

    Raises:
        ConfigurationError: On unreadable files, YAML syntax errors, a
            non-mapping document, or settings ResolverConfig rejects.
    """
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ConfigurationError(f"Cannot read configuration file '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML syntax in '{path}': {e}") from e

    if data is None:
        return get_default_config()
    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Invalid configuration in '{path}': "
            f"expected a mapping at root level, got {type(data).__name__}"
        )

    try:
        return ResolverConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'root'}: {err['msg']}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"Invalid configuration in '{path}': {problems}"
        ) from e


def load_config(config_path: str | None = None) -> ResolverConfig:
    """Load config_path, else a discovered file in cwd, else defaults.

    Raises:
        ConfigurationError: If the chosen file is invalid.
    """
    path = Path(config_path) if config_path is not None else find_config_file()
    if path is None:
        return get_default_config()
    return load_config_file(path)


def apply_credentials(
    config: ResolverConfig,
    username: str | None = None,
    token: str | None = None,
) -> ResolverConfig:
    """Overlay command-line or environment credentials on config.

    Only values that are not None replace configured ones; the input
    config is left untouched.
    """
    updates = {
        key: value
        for key, value in (("github_username", username), ("github_token", token))
        if value is not None
    }
    return config.model_copy(update=updates) if updates else config
