"""Pattern Registry - Registry pattern for the demo catalog.

Every demo is registered under a unique name together with its category, a
one-line summary and a factory that builds its command handler. The CLI only
talks to the registry, so adding a demo never touches the command routing.
"""

import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from src.domain.base.exceptions import ConfigurationError, EntityNotFoundError
from src.infrastructure.logging.logger import get_logger


class PatternCategory(str, Enum):
    """Design pattern families covered by the gallery."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"


class PatternNotFoundError(EntityNotFoundError):
    """Raised when an unknown pattern name is requested."""

    def __init__(self, name: str):
        super().__init__("Pattern", name)


class PatternRegistration:
    """Container for pattern registration information."""

    def __init__(
        self,
        name: str,
        category: PatternCategory,
        summary: str,
        handler_factory: Callable[..., Any],
        interactive: bool = False,
        module: Optional[str] = None,
    ):
        """
        Initialize pattern registration.

        Args:
            name: Unique kebab-case name, e.g. 'abstract-factory'
            category: Pattern family
            summary: One-line description shown by the catalog
            handler_factory: Callable building the demo command handler
            interactive: Whether the demo reads from standard input
            module: Dotted path of the domain module implementing the pattern
        """
        self.name = name
        self.category = category
        self.summary = summary
        self.handler_factory = handler_factory
        self.interactive = interactive
        self.module = module

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
            "interactive": self.interactive,
        }


class PatternRegistry:
    """
    Registry for demo handler factories.

    Registration order is preserved and is the order used for listings and
    for running every demo in turn.
    """

    def __init__(self) -> None:
        """Initialize pattern registry."""
        self._registrations: Dict[str, PatternRegistration] = {}
        self._logger = get_logger(__name__)
        self._registration_lock = threading.RLock()

    def register_pattern(
        self,
        name: str,
        category: PatternCategory,
        summary: str,
        handler_factory: Callable[..., Any],
        interactive: bool = False,
        module: Optional[str] = None,
    ) -> None:
        """
        Register a demo under a unique name.

        Raises:
            ConfigurationError: If the name is already registered
        """
        with self._registration_lock:
            if name in self._registrations:
                raise ConfigurationError(
                    f"Pattern '{name}' is already registered", "DUPLICATE_PATTERN", {"name": name}
                )
            self._registrations[name] = PatternRegistration(
                name=name,
                category=PatternCategory(category),
                summary=summary,
                handler_factory=handler_factory,
                interactive=interactive,
                module=module,
            )
            self._logger.debug("Registered pattern", pattern=name, category=str(category))

    def unregister_pattern(self, name: str) -> bool:
        """
        Unregister a pattern.

        Returns:
            True if the pattern was unregistered, False if not found
        """
        with self._registration_lock:
            if name in self._registrations:
                del self._registrations[name]
                return True
            return False

    def is_pattern_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registration(self, name: str) -> PatternRegistration:
        """
        Get the registration for a pattern.

        Raises:
            PatternNotFoundError: If the pattern is not registered
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise PatternNotFoundError(name)
        return registration

    def list_patterns(self, category: Optional[PatternCategory] = None) -> List[PatternRegistration]:
        """List registrations in registration order, optionally for one category."""
        registrations = list(self._registrations.values())
        if category is None:
            return registrations
        category = PatternCategory(category)
        return [r for r in registrations if r.category is category]

    def get_registered_patterns(self) -> List[str]:
        return list(self._registrations.keys())

    def create_handler(self, name: str, *args: Any, **kwargs: Any) -> Any:
        """
        Create the command handler for a pattern using its registered factory.

        Raises:
            PatternNotFoundError: If the pattern is not registered
        """
        registration = self.get_registration(name)
        self._logger.debug("Creating demo handler", pattern=name)
        return registration.handler_factory(*args, **kwargs)

    def clear_registrations(self) -> None:
        with self._registration_lock:
            self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)
