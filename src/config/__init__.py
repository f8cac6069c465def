"""Configuration package with clean public API."""

from .defaults import CONFIG_ENV_VAR, DEFAULT_CONFIG, LogDestination, LogLevel
from .manager import ConfigurationManager, get_config_manager, load_config_file
from .schemas import (
    AppConfig,
    DemoConfig,
    FacadeDemoConfig,
    LogFileConfig,
    LoggingConfig,
    ProxyDemoConfig,
    validate_config,
)

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "LogFileConfig",
    "DemoConfig",
    "FacadeDemoConfig",
    "ProxyDemoConfig",
    "ConfigurationManager",
    "get_config_manager",
    "load_config_file",
    "DEFAULT_CONFIG",
    "CONFIG_ENV_VAR",
    "LogLevel",
    "LogDestination",
]
