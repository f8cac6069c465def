"""Flyweight: cars sharing their model data.

A ``CarFlyweight`` holds the intrinsic state (model, brand, engine type) that
many cars have in common. The registration number and owner are extrinsic and
are passed in by the caller every time details are displayed.
"""

import logging
from typing import Dict, Tuple

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

IntrinsicKey = Tuple[str, str, str]


class CarFlyweight(BaseModel):
    """Shared, immutable car data."""

    model_config = ConfigDict(frozen=True)

    model: str
    brand: str
    engine_type: str

    def display_car_details(self, registration_number: str, owner: str) -> str:
        return "\n".join(
            [
                "Car Details:",
                f"Model: {self.model}",
                f"Brand: {self.brand}",
                f"Engine Type: {self.engine_type}",
                f"Registration Number: {registration_number}",
                f"Owner: {owner}",
            ]
        )


class CarFlyweightFactory:
    """Creates flyweights on first request and reuses them afterwards."""

    def __init__(self) -> None:
        self._cars: Dict[IntrinsicKey, CarFlyweight] = {}

    @staticmethod
    def generate_key(model: str, brand: str, engine_type: str) -> str:
        """Readable key for one combination of intrinsic state."""
        return f"{model}_{brand}_{engine_type}"

    def is_cached(self, model: str, brand: str, engine_type: str) -> bool:
        return (model, brand, engine_type) in self._cars

    def get_or_create(self, model: str, brand: str, engine_type: str) -> Tuple[CarFlyweight, bool]:
        """
        Look up the shared flyweight for this intrinsic state, creating it on a miss.

        Returns:
            The flyweight and True if this call created it, False if it was reused
        """
        # Cache on the tuple so "a_b" + "c" and "a" + "b_c" never share an entry.
        intrinsic = (model, brand, engine_type)
        car = self._cars.get(intrinsic)
        if car is not None:
            logger.debug("Reusing existing CarFlyweight: %s", self.generate_key(*intrinsic))
            return car, False

        car = CarFlyweight(model=model, brand=brand, engine_type=engine_type)
        self._cars[intrinsic] = car
        logger.debug("Creating new CarFlyweight: %s", self.generate_key(*intrinsic))
        return car, True

    def get_car_flyweight(self, model: str, brand: str, engine_type: str) -> CarFlyweight:
        """Return the shared flyweight for this intrinsic state, creating it if necessary."""
        return self.get_or_create(model, brand, engine_type)[0]

    @property
    def flyweight_count(self) -> int:
        return len(self._cars)
