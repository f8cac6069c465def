"""Shared fixtures for the pattern gallery test suite."""

import io
import os
from unittest.mock import patch

import pytest

from src.config.schemas.app_schema import AppConfig
from src.config.schemas.logging_schema import LoggingConfig
from src.infrastructure.logging.logger import reset_logging, setup_logging
from src.infrastructure.patterns.singleton_registry import SingletonRegistry
from src.interface.command_handlers import DemoContext


@pytest.fixture(autouse=True)
def quiet_logging():
    """Route structured logs through stdlib logging at WARNING for every test."""
    setup_logging(LoggingConfig(level="WARNING"))
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def clean_environment():
    """Keep configuration environment variables from leaking into tests."""
    names = [
        "PATTERN_GALLERY_CONFIG",
        "PATTERN_GALLERY_ENV",
        "PATTERN_GALLERY_HOME",
        "PATTERN_GALLERY_PROXY_PIN",
        "LOG_LEVEL",
        "LOG_DESTINATION",
    ]
    cleaned = {key: value for key, value in os.environ.items() if key not in names}
    with patch.dict(os.environ, cleaned, clear=True):
        yield


@pytest.fixture
def app_config():
    return AppConfig()


@pytest.fixture
def singletons():
    return SingletonRegistry()


@pytest.fixture
def demo_context(app_config, singletons):
    """Demo context writing to in-memory streams."""
    return DemoContext(
        config=app_config,
        singletons=singletons,
        stdin=io.StringIO(""),
        stdout=io.StringIO(),
        stderr=io.StringIO(),
    )
