"""
Domain Layer - one module per design pattern.

This domain layer is organized by pattern family:
- base/: Shared kernel with the exception hierarchy
- creational/: Abstract Factory, Builder, Factory Method, Singleton, Prototype
- structural/: Adapter, Bridge, Composite, Decorator, Facade, Flyweight, Proxy

Pattern modules never print. Operations return the lines or values a demo
shows, and the interface layer decides where they go.
"""

from .base import (
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
