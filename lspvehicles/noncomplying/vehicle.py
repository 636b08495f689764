"""
Vehicle hierarchy that breaks substitutability.

Kept to show what the complying package fixes. The root Vehicle declares
start_motor, so every subclass inherits it, including Bicycle, which can
only answer by raising. Code written against Vehicle cannot safely call
start_motor on an arbitrary vehicle.
"""

from __future__ import annotations

from ..constants import (
    ACCELERATE_VERB,
    START_MOTOR_OPERATION,
    START_MOTOR_VERB,
    STOP_VERB,
)
from ..exceptions import UnsupportedOperationError
from ..log import LogComponent, get_logger
from ..narration import narrate

logger = get_logger(LogComponent.NONCOMPLYING)


class Vehicle:
    """Base vehicle carrying every operation any vehicle might need."""

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        return self._name

    def start_motor(self) -> None:
        narrate(START_MOTOR_VERB, self._name, logger)

    def accelerate(self) -> None:
        narrate(ACCELERATE_VERB, self._name, logger)

    def stop(self) -> None:
        narrate(STOP_VERB, self._name, logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class CombustionVehicle(Vehicle):
    pass


class ElectricVehicle(Vehicle):
    pass


class Bicycle(Vehicle):
    """Bicycle forced to inherit start_motor."""

    def start_motor(self) -> None:
        """Always raises: a bicycle has no motor."""
        raise UnsupportedOperationError(START_MOTOR_OPERATION, self._name)
