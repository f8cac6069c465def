"""Tests for the application bootstrap."""

import io

import pytest

from src.bootstrap import Application, create_application
from src.domain.creational.singleton import GlobalCoffeeConfig
from src.infrastructure.registry.pattern_registry import PatternNotFoundError


class TestApplication:
    """Application wiring."""

    def setup_method(self):
        """Set up test fixtures."""
        self.app = create_application()

    def test_initialize(self):
        assert self.app.initialize() is True
        assert len(self.app.pattern_registry) == 12

    def test_initialize_with_log_level_override(self):
        import logging

        self.app.initialize("DEBUG")
        assert logging.getLogger().level == logging.DEBUG

    def test_run_pattern(self):
        out = io.StringIO()
        assert self.app.run_pattern("decorator", stdout=out) == 0
        assert "Total Cost: $3.7" in out.getvalue()

    def test_run_pattern_passes_options(self):
        out = io.StringIO()
        assert self.app.run_pattern("factory-method", stdout=out, machine_type=99) == 1

    def test_none_options_are_ignored(self):
        out = io.StringIO()
        code = self.app.run_pattern("abstract-factory", stdin=io.StringIO("1\n"), stdout=out, choice=None)
        assert code == 0

    def test_unknown_pattern(self):
        with pytest.raises(PatternNotFoundError):
            self.app.run_pattern("visitor")

    def test_singletons_shared_across_runs(self):
        self.app.run_pattern("singleton", stdout=io.StringIO())
        assert self.app.singletons.has(GlobalCoffeeConfig)

    def test_separate_applications_have_separate_singletons(self):
        other = Application()
        assert GlobalCoffeeConfig.get_instance(self.app.singletons) is not GlobalCoffeeConfig.get_instance(
            other.singletons
        )

    def test_run_all(self):
        out = io.StringIO()
        assert self.app.run_all(stdout=out, stderr=io.StringIO()) == 0

        text = out.getvalue()
        assert text.startswith("=== abstract-factory ===\n")
        assert "Preparing simple coffee." in text
        for name in self.app.pattern_registry.get_registered_patterns():
            assert f"=== {name} ===" in text

    def test_run_all_reports_first_failure(self):
        registry = self.app.pattern_registry
        registration = registry.get_registration("factory-method")

        class FailingDemo(registration.handler_factory):
            def run(self):
                return 1

        registry.unregister_pattern("factory-method")
        registry.register_pattern("factory-method", registration.category, registration.summary, FailingDemo)

        assert self.app.run_all(stdout=io.StringIO(), stderr=io.StringIO()) == 1

    def test_list_and_show(self):
        assert self.app.list_patterns("creational")["count"] == 5
        assert self.app.show_pattern("proxy")["pattern"]["category"] == "structural"
