"""Base classes for the demo command handlers of the interface layer.

A demo handler drives one pattern module: it builds the objects, calls the
pattern's operations and writes the resulting transcript. Handlers are
organized by pattern family:
- creational_command_handlers: Abstract Factory, Builder, Factory Method, Singleton, Prototype
- structural_command_handlers: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy
"""
from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, TextIO

from src.config.schemas.app_schema import AppConfig
from src.domain.base.ports.container_port import ContainerPort
from src.infrastructure.error.error_middleware import handle_exceptions
from src.infrastructure.logging.logger import get_logger


@dataclass
class DemoContext:
    """Everything a demo needs from the application that runs it."""

    config: AppConfig
    singletons: ContainerPort
    stdin: TextIO = field(default_factory=lambda: sys.stdin)
    stdout: TextIO = field(default_factory=lambda: sys.stdout)
    stderr: TextIO = field(default_factory=lambda: sys.stderr)
    options: Dict[str, Any] = field(default_factory=dict)


class DemoCommandHandler(ABC):
    """Base handler for one pattern demo."""

    pattern_name = "demo"

    def __init__(self, context: DemoContext):
        self.context = context
        self.logger = get_logger(self.__class__.__module__)

    def handle(self) -> int:
        """
        Run the demo.

        Returns:
            Process exit code: 0 on success, 1 on invalid input
        """
        self.logger.debug("Running demo", pattern=self.pattern_name)
        run = handle_exceptions(f"run_{self.pattern_name}", layer="interface")(self.run)
        return run()

    @abstractmethod
    def run(self) -> int:
        """Demo body; returns the exit code."""

    def echo(self, *lines: str) -> None:
        for line in lines:
            print(line, file=self.context.stdout)

    def echo_lines(self, lines: Iterable[str]) -> None:
        self.echo(*lines)

    def warn(self, message: str) -> None:
        print(message, file=self.context.stderr)

    def option(self, name: str, default: Any = None) -> Any:
        value = self.context.options.get(name)
        return default if value is None else value


def yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"
