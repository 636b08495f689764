"""
Vehicle hierarchy that honours substitutability.

Motor starting lives on MotorVehicle, not on the root Vehicle, so the only
classes that expose start_motor are the ones that can always perform it.
Bicycle extends Vehicle directly and has no start_motor at all.
"""

from __future__ import annotations

from ..constants import ACCELERATE_VERB, START_MOTOR_VERB, STOP_VERB
from ..log import LogComponent, get_logger
from ..narration import narrate

logger = get_logger(LogComponent.COMPLYING)


class Vehicle:
    """
    Base vehicle: identity plus the operations every vehicle supports.

    The name is fixed at construction and exposed read-only. No validation
    is done on it; empty or blank names are accepted as given.
    """

    def __init__(self, name: str) -> None:
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    def get_name(self) -> str:
        """Return the name given at construction."""
        return self._name

    def accelerate(self) -> None:
        narrate(ACCELERATE_VERB, self._name, logger)

    def stop(self) -> None:
        narrate(STOP_VERB, self._name, logger)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"


class MotorVehicle(Vehicle):
    """Vehicle with a motor that can be started."""

    def start_motor(self) -> None:
        narrate(START_MOTOR_VERB, self._name, logger)


class CombustionVehicle(MotorVehicle):
    """Motor vehicle driven by a combustion engine."""


class ElectricVehicle(MotorVehicle):
    """Motor vehicle driven by an electric motor."""


class Bicycle(Vehicle):
    """Pedal-powered vehicle; has no motor to start."""
