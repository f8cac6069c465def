"""Factory Method: a single creation function switching on an integer tag."""

import logging
from abc import ABC, abstractmethod
from typing import Dict, Optional, Type

logger = logging.getLogger(__name__)


class CoffeeMachine(ABC):
    """Interface for all coffee machines."""

    @abstractmethod
    def brew(self) -> str:
        """Brew and return what happened."""


class SimpleCoffeeMachine(CoffeeMachine):
    def brew(self) -> str:
        return "Brewing coffee in a simple coffee machine."


class EspressoMachine(CoffeeMachine):
    def brew(self) -> str:
        return "Brewing espresso in an espresso machine."


class CappuccinoMachine(CoffeeMachine):
    def brew(self) -> str:
        return "Brewing cappuccino in a cappuccino machine."


class CoffeeMachineFactory:
    """Creates coffee machines from a numeric machine type."""

    # 1 = Simple, 2 = Espresso, 3 = Cappuccino
    MACHINE_TYPES: Dict[int, Type[CoffeeMachine]] = {
        1: SimpleCoffeeMachine,
        2: EspressoMachine,
        3: CappuccinoMachine,
    }

    @classmethod
    def create_machine(cls, machine_type: int) -> Optional[CoffeeMachine]:
        """
        Create a coffee machine for the given type.

        Unknown types are reported through the log and yield None; callers
        must check the result before brewing.
        """
        machine_class = cls.MACHINE_TYPES.get(machine_type)
        if machine_class is None:
            logger.warning("Unknown coffee machine type (%s). Returning None.", machine_type)
            return None
        return machine_class()

    @classmethod
    def supported_types(cls) -> Dict[int, str]:
        """Map each supported machine type to its class name."""
        return {key: value.__name__ for key, value in cls.MACHINE_TYPES.items()}
