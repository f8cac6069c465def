"""Container port for single-instance ownership."""
from abc import ABC, abstractmethod
from typing import Any, Optional, Type, TypeVar

T = TypeVar('T')


class ContainerPort(ABC):
    """Port for a context object that owns exactly one instance per class."""

    @abstractmethod
    def get(self, service_type: Type[T], *args: Any, **kwargs: Any) -> T:
        """Get the instance of service_type, creating it on first access."""

    @abstractmethod
    def has(self, service_type: Type[T]) -> bool:
        """Check if an instance of service_type has been created."""

    @abstractmethod
    def reset(self, service_type: Optional[Type[T]] = None) -> None:
        """Forget one instance, or all of them when service_type is None."""
