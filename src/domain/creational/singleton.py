"""Singleton: one process-wide coffee configuration store.

The single instance is owned by an explicit context object (any
``ContainerPort``, normally the application's ``SingletonRegistry``) instead
of a module-level global. Every call to ``GlobalCoffeeConfig.get_instance``
with the same context returns the same object.
"""

from typing import Dict, List, Tuple

from src.domain.base.ports.container_port import ContainerPort


class GlobalCoffeeConfig:
    """Key/value store for coffee preferences, e.g. ``"milk" -> "Almond"``."""

    def __init__(self) -> None:
        self._state: Dict[str, str] = {}

    @classmethod
    def get_instance(cls, container: ContainerPort) -> "GlobalCoffeeConfig":
        """Access the single instance owned by ``container``."""
        return container.get(cls)

    def set_state(self, key: str, value: str) -> None:
        """Store a value; an existing key keeps the value it already has."""
        self._state.setdefault(key, value)

    def get_state(self, key: str) -> str:
        """Get the value for ``key``, or an empty string if it is not set."""
        return self._state.get(key, "")

    def get_state_or_default(self, key: str, default_value: str) -> str:
        return self._state.get(key, default_value)

    def has_state(self, key: str) -> bool:
        return key in self._state

    def remove_state(self, key: str) -> None:
        """Remove a key. Removing a missing key is a no-op."""
        self._state.pop(key, None)

    def clear_state(self) -> None:
        self._state.clear()

    def items(self) -> List[Tuple[str, str]]:
        """All key/value pairs, sorted by key."""
        return sorted(self._state.items())

    def state_lines(self) -> List[str]:
        return [f"{key}: {value}" for key, value in self.items()]

    def __len__(self) -> int:
        return len(self._state)
