"""Application bootstrap - wires configuration, logging and the pattern catalog."""

from __future__ import annotations

import sys
from typing import Any, Dict, Optional, TextIO

from src.config import AppConfig
from src.config.manager import ConfigurationManager, get_config_manager
from src.infrastructure.logging.logger import get_logger, setup_logging
from src.infrastructure.patterns.singleton_registry import SingletonRegistry
from src.infrastructure.registry.pattern_registry import PatternRegistry


class Application:
    """Application context owning configuration, the demo catalog and shared instances."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        """Initialize the instance."""
        self.config_path = config_path
        self._initialized = False

        # Defer configuration loading until first use
        self._config_manager: Optional[ConfigurationManager] = None
        self._pattern_registry: Optional[PatternRegistry] = None
        self._singletons = SingletonRegistry()

        self.logger = get_logger(__name__)

    def _ensure_config_manager(self) -> ConfigurationManager:
        """Ensure config manager is created (lazy initialization)."""
        if self._config_manager is None:
            self._config_manager = get_config_manager(self.config_path)
        return self._config_manager

    def _ensure_registry(self) -> PatternRegistry:
        """Ensure the pattern catalog is populated (lazy initialization)."""
        if self._pattern_registry is None:
            from src.interface.registration import register_all_patterns

            self._pattern_registry = register_all_patterns(PatternRegistry())
        return self._pattern_registry

    def initialize(self, log_level: Optional[str] = None) -> bool:
        """
        Load configuration and set up logging.

        Args:
            log_level: Overrides the configured log level when given

        Returns:
            True once the application is ready

        Raises:
            ConfigurationError: If the configuration cannot be loaded
        """
        if self._initialized:
            return True

        app_config = self.get_config()
        logging_config = app_config.logging
        if log_level:
            logging_config = logging_config.model_copy(update={"level": log_level.upper()})
        setup_logging(logging_config)

        self._ensure_registry()
        self._initialized = True
        self.logger.debug(
            "Application initialized",
            environment=app_config.environment,
            patterns=len(self._pattern_registry),
        )
        return True

    @property
    def config_manager(self) -> ConfigurationManager:
        return self._ensure_config_manager()

    @property
    def pattern_registry(self) -> PatternRegistry:
        return self._ensure_registry()

    @property
    def singletons(self) -> SingletonRegistry:
        return self._singletons

    def get_config(self) -> AppConfig:
        """Get the validated application configuration."""
        return self._ensure_config_manager().get_typed()

    def run_pattern(
        self,
        name: str,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        **options: Any,
    ) -> int:
        """
        Run one demo by name.

        Args:
            name: Registered pattern name
            stdin: Input stream for interactive demos (defaults to sys.stdin)
            stdout: Transcript destination (defaults to sys.stdout)
            stderr: Diagnostics destination (defaults to sys.stderr)
            **options: Demo options such as ``choice`` or ``machine_type``

        Returns:
            The demo's exit code

        Raises:
            PatternNotFoundError: If no demo is registered under ``name``
        """
        from src.interface.command_handlers import DemoContext

        registry = self._ensure_registry()
        registration = registry.get_registration(name)
        context = DemoContext(
            config=self.get_config(),
            singletons=self._singletons,
            stdin=stdin or sys.stdin,
            stdout=stdout or sys.stdout,
            stderr=stderr or sys.stderr,
            options={k: v for k, v in options.items() if v is not None},
        )
        handler = registry.create_handler(registration.name, context)
        return handler.handle()

    def run_all(
        self,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ) -> int:
        """
        Run every demo in catalog order.

        Interactive demos are given choice 1 instead of reading standard input.

        Returns:
            0 if every demo succeeded, otherwise the first non-zero exit code
        """
        out = stdout or sys.stdout
        exit_code = 0
        for index, registration in enumerate(self._ensure_registry().list_patterns()):
            if index:
                print(file=out)
            print(f"=== {registration.name} ===", file=out)
            options: Dict[str, Any] = {"choice": 1} if registration.interactive else {}
            code = self.run_pattern(registration.name, stdout=out, stderr=stderr, **options)
            if code and not exit_code:
                exit_code = code
        return exit_code

    def list_patterns(self, category: Optional[str] = None) -> Dict[str, Any]:
        from src.interface.catalog_command_handlers import handle_list_patterns

        return handle_list_patterns(self._ensure_registry(), category)

    def show_pattern(self, name: str) -> Dict[str, Any]:
        from src.interface.catalog_command_handlers import handle_show_pattern

        return handle_show_pattern(self._ensure_registry(), name)

    def show_config(self) -> Dict[str, Any]:
        from src.interface.catalog_command_handlers import handle_show_config

        return handle_show_config(self._ensure_config_manager())

    def validate_config(self, config_file: Optional[str] = None) -> Dict[str, Any]:
        from src.interface.catalog_command_handlers import handle_validate_config

        return handle_validate_config(config_file, self._ensure_config_manager())


def create_application(config_path: Optional[str] = None) -> Application:
    """Create an application instance."""
    return Application(config_path)
