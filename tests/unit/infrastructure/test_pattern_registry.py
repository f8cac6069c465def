"""Tests for the pattern registry."""

from unittest.mock import Mock

import pytest

from src.domain.base.exceptions import ConfigurationError, EntityNotFoundError
from src.infrastructure.registry.pattern_registry import (
    PatternCategory,
    PatternNotFoundError,
    PatternRegistry,
)
from src.interface.registration import register_all_patterns


class TestPatternRegistry:
    """Test pattern registry functionality."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = PatternRegistry()
        self.mock_handler_factory = Mock(return_value="handler_instance")

    def test_register_and_create_handler(self):
        """Test registering a pattern and building its handler."""
        self.registry.register_pattern(
            "builder", PatternCategory.CREATIONAL, "Stepwise construction", self.mock_handler_factory
        )

        assert self.registry.is_pattern_registered("builder")
        assert "builder" in self.registry.get_registered_patterns()

        handler = self.registry.create_handler("builder", "context")
        assert handler == "handler_instance"
        self.mock_handler_factory.assert_called_once_with("context")

    def test_duplicate_registration_rejected(self):
        """Test that a name can only be registered once."""
        self.registry.register_pattern("proxy", "structural", "Access control", self.mock_handler_factory)

        with pytest.raises(ConfigurationError) as exc_info:
            self.registry.register_pattern("proxy", "structural", "Again", self.mock_handler_factory)
        assert exc_info.value.error_code == "DUPLICATE_PATTERN"

    def test_unknown_pattern(self):
        """Test lookup of an unregistered pattern."""
        with pytest.raises(PatternNotFoundError) as exc_info:
            self.registry.get_registration("visitor")

        assert isinstance(exc_info.value, EntityNotFoundError)
        assert str(exc_info.value) == "Pattern with ID visitor not found"

    def test_create_handler_for_unknown_pattern(self):
        with pytest.raises(PatternNotFoundError):
            self.registry.create_handler("visitor")

    def test_unregister(self):
        self.registry.register_pattern("bridge", "structural", "Two hierarchies", self.mock_handler_factory)

        assert self.registry.unregister_pattern("bridge") is True
        assert self.registry.unregister_pattern("bridge") is False
        assert len(self.registry) == 0

    def test_list_patterns_filters_by_category(self):
        self.registry.register_pattern("builder", "creational", "a", self.mock_handler_factory)
        self.registry.register_pattern("adapter", "structural", "b", self.mock_handler_factory)
        self.registry.register_pattern("prototype", "creational", "c", self.mock_handler_factory)

        names = [r.name for r in self.registry.list_patterns(PatternCategory.CREATIONAL)]
        assert names == ["builder", "prototype"]
        assert [r.name for r in self.registry.list_patterns("structural")] == ["adapter"]

    def test_registration_to_dict(self):
        self.registry.register_pattern(
            "abstract-factory",
            "creational",
            "Product families",
            self.mock_handler_factory,
            interactive=True,
            module="src.domain.creational.abstract_factory",
        )
        registration = self.registry.get_registration("abstract-factory")

        assert registration.to_dict() == {
            "name": "abstract-factory",
            "category": "creational",
            "summary": "Product families",
            "interactive": True,
        }
        assert registration.module == "src.domain.creational.abstract_factory"

    def test_clear_registrations(self):
        self.registry.register_pattern("builder", "creational", "a", self.mock_handler_factory)
        self.registry.clear_registrations()
        assert self.registry.get_registered_patterns() == []


class TestRegisterAllPatterns:
    """The full catalog."""

    def test_twelve_patterns_in_catalog_order(self):
        registry = register_all_patterns(PatternRegistry())

        assert registry.get_registered_patterns() == [
            "abstract-factory",
            "builder",
            "factory-method",
            "singleton",
            "prototype",
            "adapter",
            "bridge",
            "composite",
            "decorator",
            "facade",
            "flyweight",
            "proxy",
        ]

    def test_categories(self):
        registry = register_all_patterns(PatternRegistry())

        assert len(registry.list_patterns(PatternCategory.CREATIONAL)) == 5
        assert len(registry.list_patterns(PatternCategory.STRUCTURAL)) == 7

    def test_only_abstract_factory_is_interactive(self):
        registry = register_all_patterns(PatternRegistry())

        interactive = [r.name for r in registry.list_patterns() if r.interactive]
        assert interactive == ["abstract-factory"]
