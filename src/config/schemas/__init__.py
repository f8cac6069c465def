"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .demo_schema import DemoConfig, FacadeDemoConfig, ProxyDemoConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "LoggingConfig",
    "LogFileConfig",
    "DemoConfig",
    "FacadeDemoConfig",
    "ProxyDemoConfig",
]
