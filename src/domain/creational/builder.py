"""Builder: stepwise, chainable construction of a coffee order.

``Coffee.create(name)`` starts a ``CoffeeBuilder``; every step returns the
builder so calls chain, and ``build()`` validates before handing out a copy.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from src.domain.base.exceptions import ValidationError


class CoffeeValidationError(ValidationError):
    """Raised when a coffee order fails validation at build time."""


class Coffee(BaseModel):
    """The product being built."""

    model_config = ConfigDict(validate_assignment=True)

    requestor_name: str
    is_hot: bool = False
    has_milk: bool = False
    has_sugar: bool = False
    cost: float = 0.0

    @staticmethod
    def create(requestor_name: str) -> CoffeeBuilder:
        """Start building a coffee for the given requestor."""
        return CoffeeBuilder(requestor_name)

    @property
    def description(self) -> str:
        temperature = "Hot" if self.is_hot else "Cold"
        milk = "with milk" if self.has_milk else "without milk"
        sugar = "and sugar" if self.has_sugar else "and no sugar"
        return f"{temperature} coffee {milk} {sugar} for {self.requestor_name} (${self.cost:.2f})"


class CoffeeBuilder:
    """Builds ``Coffee`` objects step by step."""

    def __init__(self, requestor_name: str):
        self._coffee = Coffee(requestor_name=requestor_name)

    def build(self) -> Coffee:
        """Validate the current configuration and return an independent copy."""
        self.validate()
        return self._coffee.model_copy()

    def validate(self) -> None:
        """
        Validate the current coffee configuration.

        Raises:
            CoffeeValidationError: If the requestor name is empty or the cost is negative
        """
        if not self._coffee.requestor_name.strip():
            raise CoffeeValidationError(
                "Requestor name cannot be empty.", "EMPTY_REQUESTOR_NAME"
            )
        if self._coffee.cost < 0.0:
            raise CoffeeValidationError(
                "Cost cannot be negative.", "NEGATIVE_COST", {"cost": self._coffee.cost}
            )

    def reset(self, requestor_name: str) -> CoffeeBuilder:
        """Start over with a fresh coffee, keeping this builder."""
        self._coffee = Coffee(requestor_name=requestor_name)
        return self

    def set_requestor_name(self, name: str) -> CoffeeBuilder:
        self._coffee.requestor_name = name
        return self

    def make_hot(self) -> CoffeeBuilder:
        self._coffee.is_hot = True
        return self

    def make_cold(self) -> CoffeeBuilder:
        self._coffee.is_hot = False
        return self

    def add_milk(self) -> CoffeeBuilder:
        self._coffee.has_milk = True
        return self

    def remove_milk(self) -> CoffeeBuilder:
        self._coffee.has_milk = False
        return self

    def add_sugar(self) -> CoffeeBuilder:
        self._coffee.has_sugar = True
        return self

    def remove_sugar(self) -> CoffeeBuilder:
        self._coffee.has_sugar = False
        return self

    def costs(self, cost: float) -> CoffeeBuilder:
        self._coffee.cost = cost
        return self
