"""Decorator: features (milk, sugar, whipped cream) wrap a coffee one at a time.

Each decorator adds its label to the description and its price to the cost.
"""

from abc import ABC, abstractmethod


class Coffee(ABC):
    """Component interface."""

    @abstractmethod
    def get_description(self) -> str:
        """Human readable description of the coffee."""

    @abstractmethod
    def cost(self) -> float:
        """Total price."""


class SimpleCoffee(Coffee):
    def get_description(self) -> str:
        return "Simple Coffee"

    def cost(self) -> float:
        return 2.0


class CoffeeDecorator(Coffee):
    """Base decorator: forwards to the wrapped coffee, adding ``label`` and ``price``."""

    label = ""
    price = 0.0

    def __init__(self, coffee: Coffee):
        self._coffee = coffee

    @property
    def wrapped(self) -> Coffee:
        return self._coffee

    def get_description(self) -> str:
        if not self.label:
            return self._coffee.get_description()
        return f"{self._coffee.get_description()}, {self.label}"

    def cost(self) -> float:
        return self._coffee.cost() + self.price


class MilkDecorator(CoffeeDecorator):
    label = "Milk"
    price = 0.5


class SugarDecorator(CoffeeDecorator):
    label = "Sugar"
    price = 0.2


class WhippedCreamDecorator(CoffeeDecorator):
    label = "Whipped Cream"
    price = 1.0
