"""Logging infrastructure package."""

from src.infrastructure.logging.logger import get_logger, reset_logging, setup_logging

__all__ = ["get_logger", "setup_logging", "reset_logging"]
