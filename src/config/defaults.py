# src/config/defaults.py
from enum import Enum
from typing import Any, Dict

CONFIG_ENV_VAR = "PATTERN_GALLERY_CONFIG"


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    CONSOLE = "console"
    BOTH = "both"


DEFAULT_CONFIG: Dict[str, Any] = {
    "version": "1.0.0",
    "environment": "${PATTERN_GALLERY_ENV:development}",

    # Logging configuration
    "logging": {
        "level": "${LOG_LEVEL:WARNING}",
        "destination": "${LOG_DESTINATION:console}",
        "json_format": False,
        "file": {
            "path": "${PATTERN_GALLERY_HOME:~/.pattern-gallery}/logs/pattern-gallery.log",
            "max_size_mb": 10,
            "backup_count": 5,
        },
    },

    # Demo inputs
    "demos": {
        "facade": {
            "movie": "Inception",
            "volume": 5,
        },
        "proxy": {
            "pin": "${PATTERN_GALLERY_PROXY_PIN:1234}",
            "initial_balance": 100.0,
        },
    },
}
