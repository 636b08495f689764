"""
Demo driver for lspvehicles.

drive() and start_and_drive() only use the operations promised by the
protocol they accept, so any vehicle satisfying that protocol can be passed
in. run_demo() does this with the complying classes; run_noncomplying_demo()
does the same with the noncomplying ones and records which vehicles broke
the promise.
"""

from __future__ import annotations

from typing import List

from .complying import Bicycle, CombustionVehicle, ElectricVehicle
from .constants import BICYCLE_DEMO_NAME, COMBUSTION_DEMO_NAME, ELECTRIC_DEMO_NAME
from .exceptions import UnsupportedOperationError
from .log import LogComponent, get_logger
from .noncomplying import Bicycle as NoncomplyingBicycle
from .noncomplying import CombustionVehicle as NoncomplyingCombustionVehicle
from .noncomplying import ElectricVehicle as NoncomplyingElectricVehicle
from .protocols import MotorVehicleProtocol, VehicleProtocol

logger = get_logger(LogComponent.DEMO)


def drive(vehicle: VehicleProtocol) -> None:
    """Accelerate, then stop."""
    vehicle.accelerate()
    vehicle.stop()


def start_and_drive(vehicle: MotorVehicleProtocol) -> None:
    """Start the motor, then drive."""
    vehicle.start_motor()
    drive(vehicle)


def run_demo() -> List[VehicleProtocol]:
    """
    Exercise every complying vehicle through its own capability set.

    Motorized vehicles are started and driven; the bicycle is only driven.

    Returns:
        The vehicles exercised, in order.
    """
    suv = CombustionVehicle(COMBUSTION_DEMO_NAME)
    tesla = ElectricVehicle(ELECTRIC_DEMO_NAME)
    bike = Bicycle(BICYCLE_DEMO_NAME)

    for motor_vehicle in (suv, tesla):
        logger.debug(f"Starting and driving {motor_vehicle!r}")
        start_and_drive(motor_vehicle)

    logger.debug(f"Driving {bike!r}")
    drive(bike)
    return [suv, tesla, bike]


def run_noncomplying_demo() -> List[str]:
    """
    Treat every noncomplying vehicle as a motor vehicle.

    The root noncomplying Vehicle declares start_motor, so a caller has no
    way to tell which vehicles can honour it. Vehicles whose start_motor
    raises are logged and skipped.

    Returns:
        Names of the vehicles that raised UnsupportedOperationError.
    """
    fleet = [
        NoncomplyingCombustionVehicle(COMBUSTION_DEMO_NAME),
        NoncomplyingElectricVehicle(ELECTRIC_DEMO_NAME),
        NoncomplyingBicycle(BICYCLE_DEMO_NAME),
    ]
    broken: List[str] = []
    for vehicle in fleet:
        try:
            start_and_drive(vehicle)
        except UnsupportedOperationError as e:
            logger.warning(f"Substitution failed for {vehicle!r}: {e}")
            broken.append(e.vehicle_name)
    return broken


__all__ = ["drive", "start_and_drive", "run_demo", "run_noncomplying_demo"]
