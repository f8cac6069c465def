"""Tests for the coffee product families."""

import pytest

from src.domain.creational.abstract_factory import (
    EspressoFactory,
    EspressoMachine,
    SimpleCoffeeFactory,
    SimpleCoffeeMachine,
    select_factory,
)


class TestCoffeeFactories:
    """Each factory produces one consistent family."""

    def test_simple_factory_family(self):
        factory = SimpleCoffeeFactory()
        machine = factory.create_coffee_machine()
        assert isinstance(machine, SimpleCoffeeMachine)
        assert machine.brew() == "Brewing coffee in a simple coffee machine."
        assert factory.create_coffee().prepare() == "Preparing simple coffee."

    def test_espresso_factory_family(self):
        factory = EspressoFactory()
        machine = factory.create_coffee_machine()
        assert isinstance(machine, EspressoMachine)
        assert machine.brew() == "Brewing espresso in an espresso machine."
        assert factory.create_coffee().prepare() == "Preparing espresso."

    def test_factories_create_new_products_each_time(self):
        factory = EspressoFactory()
        assert factory.create_coffee() is not factory.create_coffee()


class TestSelectFactory:
    """Menu choice to factory mapping."""

    @pytest.mark.parametrize("choice,factory_class", [(1, SimpleCoffeeFactory), (2, EspressoFactory)])
    def test_known_choices(self, choice, factory_class):
        assert isinstance(select_factory(choice), factory_class)

    @pytest.mark.parametrize("choice", [0, 3, -1, 99])
    def test_unknown_choice_returns_none(self, choice):
        assert select_factory(choice) is None
