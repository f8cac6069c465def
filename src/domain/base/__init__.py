"""Base domain layer - shared kernel for all pattern modules."""

from .exceptions import (
    ConfigurationError,
    DomainException,
    EntityNotFoundError,
    ValidationError,
)

__all__ = [
    "DomainException",
    "ValidationError",
    "ConfigurationError",
    "EntityNotFoundError",
]
