"""Infrastructure registry patterns."""

from .pattern_registry import (
    PatternCategory,
    PatternNotFoundError,
    PatternRegistration,
    PatternRegistry,
)

__all__ = [
    'PatternRegistry',
    'PatternRegistration',
    'PatternCategory',
    'PatternNotFoundError',
]
