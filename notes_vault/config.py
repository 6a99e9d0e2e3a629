"""Configuration loading for the vault server.

The configuration is read once at startup and returned as a :class:`VaultConfig`
value; callers pass it on explicitly rather than importing a module global.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

import yaml

from notes_vault.constants import (
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG_PATHS,
    MAX_RESULTS_ENV_VAR,
    VAULT_PATH_ENV_VAR,
)
from notes_vault.data_models import (
    DEFAULT_FILE_PATTERN,
    DEFAULT_MAX_SEARCH_RESULTS,
    VaultConfig,
)
from notes_vault.errors import ConfigurationError

logger = logging.getLogger(__name__)

# Config file keys, with the camelCase spellings accepted from JSON configs.
_KEY_ALIASES = {
    "vault_path": ("vault_path", "notesDirectory"),
    "max_search_results": ("max_search_results", "maxSearchResults"),
    "file_pattern": ("file_pattern", "defaultFilePattern"),
    "exclude_patterns": ("exclude_patterns", "excludePatterns"),
}


def _lookup(raw_config: Mapping[str, Any], key: str) -> Any:
    for alias in _KEY_ALIASES[key]:
        if alias in raw_config:
            return raw_config[alias]
    return None


def _find_config_file(environ: Mapping[str, str]) -> Optional[Path]:
    """Return the config file to read: the env override, else the first default present."""
    explicit = environ.get(CONFIG_ENV_VAR)
    if explicit:
        path = Path(explicit).expanduser()
        if not path.is_file():
            raise ConfigurationError(f"Configuration file not found at {path}")
        return path

    for candidate in DEFAULT_CONFIG_PATHS:
        path = candidate.expanduser()
        if path.is_file():
            return path
    return None


def read_config_file(config_path: Path) -> dict[str, Any]:
    """Parse a YAML (or JSON) configuration file into a mapping.

    Raises:
        ConfigurationError: If the file cannot be read or is not a mapping.
    """
    try:
        raw_config = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Configuration file {config_path} is not valid YAML/JSON: {exc}") from exc
    except OSError as exc:
        raise ConfigurationError(f"Unable to read configuration file {config_path}: {exc}") from exc

    if not isinstance(raw_config, dict):
        raise ConfigurationError(f"Configuration file {config_path} must contain a mapping")
    return raw_config


def _parse_max_results(value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError("max_search_results must be a positive integer")
    try:
        parsed = int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigurationError(f"max_search_results must be a positive integer, got {value!r}") from exc
    if parsed < 1:
        raise ConfigurationError(f"max_search_results must be a positive integer, got {value!r}")
    return parsed


def _parse_exclude_patterns(value: Any) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        return (value,)
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise ConfigurationError("exclude_patterns must be a list of strings")
    return tuple(value)


def _resolve_vault_root(raw_path: Any) -> Path:
    """Expand ``~``, make absolute and check the vault directory exists."""
    if not isinstance(raw_path, str) or not raw_path.strip():
        raise ConfigurationError(
            f"Vault path is required: set {VAULT_PATH_ENV_VAR} or 'vault_path' in the config file"
        )

    root = Path(raw_path.strip()).expanduser().resolve(strict=False)
    if not root.exists():
        raise ConfigurationError(f"Vault path does not exist: {root}")
    if not root.is_dir():
        raise ConfigurationError(f"Vault path is not a directory: {root}")
    return root


def load_configuration(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> VaultConfig:
    """Build the vault configuration from a config file and the environment.

    Args:
        config_path: Explicit config file. When omitted, ``NOTES_VAULT_CONFIG``
            is used, then the first existing file of ``DEFAULT_CONFIG_PATHS``.
            Having no file at all is fine as long as ``VAULT_PATH`` is set.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A :class:`VaultConfig` whose root is an existing absolute directory.
        ``VAULT_PATH`` and ``MAX_SEARCH_RESULTS`` override file values.

    Raises:
        ConfigurationError: If no vault path is configured, the path is not a
            directory, or a value has the wrong type.
    """
    environ = os.environ if environ is None else environ

    path = config_path if config_path is not None else _find_config_file(environ)
    raw_config: dict[str, Any] = {}
    if path is not None:
        raw_config = read_config_file(path)
        logger.info("Loaded configuration from %s", path)

    raw_root = environ.get(VAULT_PATH_ENV_VAR) or _lookup(raw_config, "vault_path")
    root = _resolve_vault_root(raw_root)

    raw_max = environ.get(MAX_RESULTS_ENV_VAR) or _lookup(raw_config, "max_search_results")
    max_results = DEFAULT_MAX_SEARCH_RESULTS if raw_max is None else _parse_max_results(raw_max)

    file_pattern = _lookup(raw_config, "file_pattern") or DEFAULT_FILE_PATTERN
    if not isinstance(file_pattern, str):
        raise ConfigurationError("file_pattern must be a string")

    return VaultConfig(
        root=root,
        max_search_results=max_results,
        file_pattern=file_pattern,
        exclude_patterns=_parse_exclude_patterns(_lookup(raw_config, "exclude_patterns")),
    )
