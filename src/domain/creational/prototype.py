"""Prototype: new coffee machines are cloned from registered exemplars."""

import copy
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from src.domain.base.exceptions import ValidationError

logger = logging.getLogger(__name__)

# 1=small, 2=medium, 3=large
CUP_SIZES = (1, 2, 3)


class CoffeeMachineSettingError(ValidationError):
    """Raised when a machine is given a setting it cannot hold."""


class CoffeeMachine(ABC):
    """Abstract prototype holding the customizable machine state."""

    def __init__(self, name: str = "Generic", cup_size: int = 1, milk: bool = False, sugar: int = 0):
        self.name = name
        self.cup_size = cup_size
        self.milk = milk
        self.sugar = sugar

    def clone(self) -> "CoffeeMachine":
        """Return an independent copy of this machine, state included."""
        return copy.deepcopy(self)

    @abstractmethod
    def brew_message(self) -> str:
        """The line printed when this kind of machine brews."""

    def brew(self) -> List[str]:
        return [self.brew_message(), self.display()]

    def display(self) -> str:
        """Describe the current state of the machine."""
        return (
            f"Name: {self.name}, Cup Size: {self.cup_size}, "
            f"Milk: {'Yes' if self.milk else 'No'}, Sugar: {self.sugar}"
        )

    def set_cup_size(self, size: int) -> None:
        if size not in CUP_SIZES:
            raise CoffeeMachineSettingError(
                f"Cup size must be one of {CUP_SIZES}, got {size}", "INVALID_CUP_SIZE", {"cup_size": size}
            )
        self.cup_size = size

    def set_milk(self, milk: bool) -> None:
        self.milk = milk

    def set_sugar(self, sugar: int) -> None:
        if sugar < 0:
            raise CoffeeMachineSettingError("Sugar cannot be negative", "NEGATIVE_SUGAR", {"sugar": sugar})
        self.sugar = sugar


class SimpleCoffeeMachine(CoffeeMachine):
    def __init__(self) -> None:
        super().__init__("Simple", 1, False, 0)

    def brew_message(self) -> str:
        return "Brewing coffee in a simple coffee machine."


class EspressoMachine(CoffeeMachine):
    def __init__(self) -> None:
        super().__init__("Espresso", 1, False, 0)

    def brew_message(self) -> str:
        return "Brewing espresso in an espresso machine."


class AdvancedCoffeeMachine(CoffeeMachine):
    def __init__(self) -> None:
        super().__init__("Advanced", 2, True, 2)

    def brew_message(self) -> str:
        return "Brewing coffee in an advanced coffee machine."


class CoffeeMachineManager:
    """
    Owns the exemplar machines and hands out clones of them.

    Exemplars are indexed in registration order: by default
    0 = simple, 1 = espresso, 2 = advanced.
    """

    def __init__(self, prototypes: Optional[Sequence[CoffeeMachine]] = None):
        if prototypes is None:
            prototypes = (SimpleCoffeeMachine(), EspressoMachine(), AdvancedCoffeeMachine())
        self._prototypes = tuple(prototypes)

    @property
    def prototype_count(self) -> int:
        return len(self._prototypes)

    def create_machine(self, machine_type: int) -> Optional[CoffeeMachine]:
        """
        Clone the exemplar at index ``machine_type``.

        Returns None for an index outside the registry; callers must check.
        """
        if machine_type < 0 or machine_type >= len(self._prototypes):
            logger.warning("Invalid machine type: %s", machine_type)
            return None
        return self._prototypes[machine_type].clone()
