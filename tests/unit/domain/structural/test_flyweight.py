"""Tests for shared car flyweights."""

import pydantic
import pytest

from src.domain.structural.flyweight import CarFlyweightFactory


class TestCarFlyweightFactory:
    """Intrinsic state is created once per key."""

    def setup_method(self):
        """Set up test fixtures."""
        self.factory = CarFlyweightFactory()

    def test_same_key_returns_same_object(self):
        first = self.factory.get_car_flyweight("Model S", "Tesla", "Electric")
        second = self.factory.get_car_flyweight("Model S", "Tesla", "Electric")

        assert first is second
        assert self.factory.flyweight_count == 1

    def test_different_key_creates_new_object(self):
        tesla = self.factory.get_car_flyweight("Model S", "Tesla", "Electric")
        ford = self.factory.get_car_flyweight("Mustang", "Ford", "Gasoline")

        assert tesla is not ford
        assert self.factory.flyweight_count == 2

    def test_get_or_create_reports_creation(self):
        car, created = self.factory.get_or_create("Model S", "Tesla", "Electric")
        again, created_again = self.factory.get_or_create("Model S", "Tesla", "Electric")

        assert created is True
        assert created_again is False
        assert again is car
        assert self.factory.get_car_flyweight("Model S", "Tesla", "Electric") is car

    def test_is_cached(self):
        assert self.factory.is_cached("Model S", "Tesla", "Electric") is False
        self.factory.get_car_flyweight("Model S", "Tesla", "Electric")
        assert self.factory.is_cached("Model S", "Tesla", "Electric") is True

    def test_generate_key(self):
        assert CarFlyweightFactory.generate_key("Model S", "Tesla", "Electric") == "Model S_Tesla_Electric"

    def test_keys_with_underscores_do_not_collide(self):
        first = self.factory.get_car_flyweight("a_b", "c", "d")
        second = self.factory.get_car_flyweight("a", "b_c", "d")
        assert first is not second

    def test_display_uses_extrinsic_state(self):
        car = self.factory.get_car_flyweight("Model S", "Tesla", "Electric")
        assert car.display_car_details("TS1234", "Alice").splitlines() == [
            "Car Details:",
            "Model: Model S",
            "Brand: Tesla",
            "Engine Type: Electric",
            "Registration Number: TS1234",
            "Owner: Alice",
        ]

    def test_flyweight_is_immutable(self):
        car = self.factory.get_car_flyweight("Model S", "Tesla", "Electric")
        with pytest.raises(pydantic.ValidationError):
            car.brand = "Ford"
