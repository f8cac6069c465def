"""Tests for structured logging setup."""

import json
import logging

from src.config.schemas.logging_schema import LogFileConfig, LoggingConfig
from src.infrastructure.logging.logger import get_logger, reset_logging, setup_logging


def _installed_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, "_pattern_gallery_handler", False)]


class TestSetupLogging:
    """Handlers and levels follow the logging configuration."""

    def test_console_destination(self):
        setup_logging(LoggingConfig(level="DEBUG", destination="console"))

        handlers = _installed_handlers()
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert logging.getLogger().level == logging.DEBUG

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging(LoggingConfig())
        setup_logging(LoggingConfig())
        assert len(_installed_handlers()) == 1

    def test_file_destination_writes_json(self, tmp_path):
        log_file = tmp_path / "logs" / "gallery.log"
        setup_logging(
            LoggingConfig(
                level="INFO",
                destination="file",
                json_format=True,
                file=LogFileConfig(path=str(log_file)),
            )
        )

        get_logger("tests.logging").info("Pattern ran", pattern="builder")
        for handler in _installed_handlers():
            handler.flush()

        record = json.loads(log_file.read_text().strip().splitlines()[-1])
        assert record["event"] == "Pattern ran"
        assert record["pattern"] == "builder"
        assert record["level"] == "info"

    def test_both_destinations(self, tmp_path):
        setup_logging(LoggingConfig(destination="both", file=LogFileConfig(path=str(tmp_path / "g.log"))))
        assert len(_installed_handlers()) == 2

    def test_reset_logging_removes_handlers(self):
        setup_logging(LoggingConfig())
        reset_logging()
        assert _installed_handlers() == []
