"""
Configuration loader for commitwizard.

Settings are read from two optional JSON files: a user-level
``config.json`` in ``~/.commitwizard/`` and a repository-level
``.commitwizard.json`` in the working tree root, which overrides the user
file key by key. Missing files simply leave the defaults in place.

If a file is malformed, contains unknown keys, or has values of the wrong
type, a :class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


USER_CONFIG_NAME = "config.json"
REPO_CONFIG_NAME = ".commitwizard.json"

DEFAULT_CONFIG: Dict[str, Any] = {
    # Treat the description style checks as blocking errors.
    "strict": False,
    "max_description_length": 72,
    "stage_all_default": True,
}

_EXPECTED_TYPES = {
    "strict": bool,
    "max_description_length": int,
    "stage_all_default": bool,
}


class ConfigError(Exception):
    """Raised when a configuration file is unreadable or invalid."""

    pass


def _get_config_directory() -> Path:
    """Return the user-level configuration directory (``~/.commitwizard``)."""
    return Path.home() / ".commitwizard"


def _read_config_file(config_path: Path) -> Dict[str, Any]:
    """Read and validate one configuration file."""
    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a JSON object")

    unknown = sorted(key for key in data if key not in _EXPECTED_TYPES)
    if unknown:
        raise ConfigError(f"Unknown configuration keys in {config_path}: {', '.join(unknown)}")

    for key, value in data.items():
        expected = _EXPECTED_TYPES[key]
        # bool is a subclass of int; reject it where a number is expected
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ConfigError(f"'{key}' must be of type {expected.__name__}")
        if expected is int and value <= 0:
            raise ConfigError(f"'{key}' must be a positive integer")

    logger.debug("Loaded configuration from: %s", config_path)
    return data


def load_config(repo_root: Optional[Path] = None, config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load the effective configuration.

    Args:
        repo_root: Root of the working tree; its ``.commitwizard.json`` is
                   applied on top of the user configuration.
        config_path: Explicit configuration file used instead of the
                     repository file. Unlike the implicit files it must exist.

    Returns:
        A dictionary with every key of :data:`DEFAULT_CONFIG`.

    Raises:
        ConfigError: If a file is missing (explicit path only), malformed
                     or invalid.
    """
    config = dict(DEFAULT_CONFIG)

    user_path = _get_config_directory() / USER_CONFIG_NAME
    if user_path.exists():
        config.update(_read_config_file(user_path))

    if config_path is not None:
        if not config_path.exists():
            logger.error("Configuration file '%s' does not exist", config_path)
            raise ConfigError(f"Missing configuration file: {config_path}")
        config.update(_read_config_file(config_path))
    elif repo_root is not None:
        repo_path = repo_root / REPO_CONFIG_NAME
        if repo_path.exists():
            config.update(_read_config_file(repo_path))

    logger.debug("Effective configuration: %s", config)
    return config
