"""Adapter: using a European plug through an American socket interface."""

from abc import ABC, abstractmethod
from typing import List, Optional


class AmericanSocket(ABC):
    """Target interface expected by the client."""

    @abstractmethod
    def provide_power(self) -> List[str]:
        """Provide power and return the steps taken."""


class EuropeanPlug:
    """Adaptee with an incompatible interface."""

    def connect(self) -> str:
        return "European plug connected to European socket."


class PlugAdapter(AmericanSocket):
    """Makes a ``EuropeanPlug`` usable wherever an ``AmericanSocket`` is expected."""

    def __init__(self, plug: Optional[EuropeanPlug]):
        self._plug = plug

    @property
    def plug(self) -> Optional[EuropeanPlug]:
        return self._plug

    def provide_power(self) -> List[str]:
        if self._plug is None:
            return ["No plug connected to adapter!"]
        return [
            "Adapter converting plug...",
            self._plug.connect(),
            "Power provided through adapter.",
        ]
