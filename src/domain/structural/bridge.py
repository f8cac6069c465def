"""Bridge: remotes (abstraction) and devices (implementation) vary independently.

Any remote can drive any device, and adding a new remote or device needs no
change on the other side.
"""

from abc import ABC, abstractmethod
from typing import List


class Device:
    """Implementation hierarchy."""

    label = "Device"

    def __init__(self) -> None:
        self.is_on = False

    def turn_on(self) -> str:
        self.is_on = True
        return f"{self.label} is now ON."

    def turn_off(self) -> str:
        self.is_on = False
        return f"{self.label} is now OFF."


class TV(Device):
    label = "TV"


class Radio(Device):
    label = "Radio"


class RemoteControl(ABC):
    """Abstraction hierarchy; holds the device it controls."""

    def __init__(self, device: Device):
        self.device = device

    @abstractmethod
    def press_power_button(self) -> List[str]:
        """Press the power button and return what happened."""


class BasicRemote(RemoteControl):
    def press_power_button(self) -> List[str]:
        return ["Basic remote!", self.device.turn_on()]


class AdvancedRemote(RemoteControl):
    def press_power_button(self) -> List[str]:
        return ["Advanced remote!", self.device.turn_on()]

    def press_power_off_button(self) -> List[str]:
        """Only advanced remotes can switch a device off."""
        return ["Advanced remote!", self.device.turn_off()]
