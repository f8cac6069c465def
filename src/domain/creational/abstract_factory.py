"""Abstract Factory: one factory creates a matching machine and coffee.

Each concrete factory produces a family of related products, so a client that
only talks to ``CoffeeFactory`` can never pair an espresso machine with a
simple coffee by accident.
"""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

logger = logging.getLogger(__name__)


class CoffeeMachine(ABC):
    """Abstract product A."""

    @abstractmethod
    def brew(self) -> str:
        """Brew and return what happened."""


class SimpleCoffeeMachine(CoffeeMachine):
    def brew(self) -> str:
        return "Brewing coffee in a simple coffee machine."


class EspressoMachine(CoffeeMachine):
    def brew(self) -> str:
        return "Brewing espresso in an espresso machine."


class Coffee(ABC):
    """Abstract product B."""

    @abstractmethod
    def prepare(self) -> str:
        """Prepare and return what happened."""


class SimpleCoffee(Coffee):
    def prepare(self) -> str:
        return "Preparing simple coffee."


class Espresso(Coffee):
    def prepare(self) -> str:
        return "Preparing espresso."


class CoffeeFactory(ABC):
    """Abstract factory declaring one creation method per product."""

    @abstractmethod
    def create_coffee_machine(self) -> CoffeeMachine:
        """Create the machine of this family."""

    @abstractmethod
    def create_coffee(self) -> Coffee:
        """Create the coffee of this family."""


class SimpleCoffeeFactory(CoffeeFactory):
    def create_coffee_machine(self) -> CoffeeMachine:
        return SimpleCoffeeMachine()

    def create_coffee(self) -> Coffee:
        return SimpleCoffee()


class EspressoFactory(CoffeeFactory):
    def create_coffee_machine(self) -> CoffeeMachine:
        return EspressoMachine()

    def create_coffee(self) -> Coffee:
        return Espresso()


FACTORY_CHOICES: Dict[int, Type[CoffeeFactory]] = {
    1: SimpleCoffeeFactory,
    2: EspressoFactory,
}


def select_factory(choice: int) -> Optional[CoffeeFactory]:
    """
    Select the factory for a menu choice.

    Args:
        choice: 1 for simple coffee, 2 for espresso

    Returns:
        A new factory, or None when the choice is unknown
    """
    factory_class = FACTORY_CHOICES.get(choice)
    if factory_class is None:
        logger.debug("No coffee factory for choice %s", choice)
        return None
    return factory_class()
