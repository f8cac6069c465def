"""Unified configuration management for the application."""
from __future__ import annotations

import copy
import json
import logging
import os
import threading
from pathlib import Path
from typing import Any, Dict, Optional

import pydantic
import yaml

from src.config.defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG
from src.config.schemas.app_schema import AppConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.base.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_MISSING = object()


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


def load_config_file(config_path: str) -> Dict[str, Any]:
    """
    Load a YAML or JSON configuration file.

    Args:
        config_path: Path to a .yml/.yaml or .json file

    Returns:
        Parsed configuration dictionary (empty for an empty file)

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping
    """
    path = Path(config_path).expanduser()
    if not path.is_file():
        raise ConfigurationError(
            f"Configuration file not found: {path}", details={"path": str(path)}
        )

    try:
        with path.open("r", encoding="utf-8") as f:
            if path.suffix.lower() in (".yml", ".yaml"):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(
            f"Failed to load configuration: {e}", details={"path": str(path)}
        ) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(
            "Configuration file must contain a mapping at the top level",
            details={"path": str(path)},
        )
    return data


class ConfigurationManager:
    """
    Configuration manager that serves as the single source of truth.

    Configuration is resolved lazily, in this order (later wins):
    - built-in defaults (``DEFAULT_CONFIG``)
    - the configuration file, if any
    - environment variable placeholders (``${VAR:default}``) are expanded last

    The merged result is validated against ``AppConfig``.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file or os.environ.get(CONFIG_ENV_VAR) or None
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def config_file(self) -> Optional[str]:
        """Path of the configuration file in use, if any."""
        return self._config_file

    def _ensure_loaded(self) -> None:
        with self._lock:
            if self._app_config is not None:
                return

            config = copy.deepcopy(DEFAULT_CONFIG)
            if self._config_file:
                logger.debug("Loading configuration file %s", self._config_file)
                _deep_update(config, load_config_file(self._config_file))

            config = expand_config_env_vars(config)
            try:
                app_config = AppConfig(**config)
            except pydantic.ValidationError as e:
                raise ConfigurationError(
                    f"Invalid configuration: {e.error_count()} error(s)",
                    details={"errors": e.errors(include_url=False)},
                ) from e

            self._app_config = app_config

    def get_typed(self) -> AppConfig:
        """Get the validated application configuration."""
        self._ensure_loaded()
        return self._app_config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dotted key, e.g. ``demos.facade.movie``.

        Args:
            key: Dotted path into the validated configuration
            default: Value returned when the path does not exist

        Returns:
            The configuration value or ``default``
        """
        current: Any = self.to_dict()
        for part in key.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(part, _MISSING)
            if current is _MISSING:
                return default
        return current

    def to_dict(self) -> Dict[str, Any]:
        """Get the validated configuration as a plain dictionary."""
        return self.get_typed().model_dump(mode="json")

    def reload(self) -> AppConfig:
        """Drop cached configuration and load it again."""
        with self._lock:
            self._app_config = None
        return self.get_typed()


def get_config_manager(config_file: Optional[str] = None) -> ConfigurationManager:
    """Create a configuration manager for the given file."""
    return ConfigurationManager(config_file)
