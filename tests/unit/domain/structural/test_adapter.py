"""Tests for the plug adapter."""

from src.domain.structural.adapter import AmericanSocket, EuropeanPlug, PlugAdapter


class TestPlugAdapter:
    """Adapter forwards to the adaptee."""

    def test_adapter_is_an_american_socket(self):
        assert isinstance(PlugAdapter(EuropeanPlug()), AmericanSocket)

    def test_provide_power_with_plug(self):
        assert PlugAdapter(EuropeanPlug()).provide_power() == [
            "Adapter converting plug...",
            "European plug connected to European socket.",
            "Power provided through adapter.",
        ]

    def test_provide_power_without_plug(self):
        adapter = PlugAdapter(None)
        assert adapter.plug is None
        assert adapter.provide_power() == ["No plug connected to adapter!"]
