"""Registry owning one instance per class."""

import threading
from typing import Any, Dict, Optional, Type, TypeVar

from src.domain.base.ports.container_port import ContainerPort
from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class SingletonRegistry(ContainerPort):
    """
    Context object that owns exactly one instance of each registered class.

    The application creates one registry at startup and passes it to whoever
    needs a single-instance object. Nothing here is module-global, so tests
    and separate applications get isolated instances simply by creating
    another registry.
    """

    def __init__(self) -> None:
        self._instances: Dict[type, Any] = {}
        self._lock = threading.RLock()
        self._logger = get_logger(__name__)

    def get(self, service_type: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the instance of service_type, creating it on first access.

        Args:
            service_type: The class to get an instance of
            *args: Arguments to pass to the constructor if creating a new instance
            **kwargs: Keyword arguments to pass to the constructor if creating a new instance

        Returns:
            The single instance of service_type
        """
        instance = self._instances.get(service_type)
        if instance is None:
            with self._lock:
                instance = self._instances.get(service_type)
                if instance is None:
                    instance = service_type(*args, **kwargs)
                    self._instances[service_type] = instance
                    self._logger.debug("Singleton created", singleton=service_type.__name__)
        return instance

    def has(self, service_type: Type[T]) -> bool:
        return service_type in self._instances

    def reset(self, service_type: Optional[Type[T]] = None) -> None:
        with self._lock:
            if service_type is None:
                self._instances.clear()
            else:
                self._instances.pop(service_type, None)

    def __len__(self) -> int:
        return len(self._instances)
