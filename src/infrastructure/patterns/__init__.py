"""Infrastructure patterns package."""

from src.infrastructure.patterns.singleton_registry import SingletonRegistry

__all__ = ["SingletonRegistry"]
