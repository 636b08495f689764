"""
lspvehicles - the Liskov Substitution Principle on a small vehicle hierarchy.

Two sibling packages hold the same vehicles:

- lspvehicles.complying: start_motor is declared on MotorVehicle, which only
  CombustionVehicle and ElectricVehicle extend. Bicycle has no start_motor.
- lspvehicles.noncomplying: start_motor is declared on the root Vehicle and
  Bicycle has to raise UnsupportedOperationError from it.

Quick Start:
    from lspvehicles import Bicycle, ElectricVehicle, drive, start_and_drive

    start_and_drive(ElectricVehicle("Tesla"))  # starting motor / accelerate / stop
    drive(Bicycle("BMX Bike"))                 # accelerate / stop
"""

from .complying import (
    Bicycle,
    CombustionVehicle,
    ElectricVehicle,
    MotorVehicle,
    Vehicle,
)
from .demo import drive, run_demo, run_noncomplying_demo, start_and_drive
from .exceptions import UnsupportedOperationError, VehicleError
from .log import LogComponent, LogLevel, configure_logging, get_logger
from .protocols import MotorVehicleProtocol, VehicleProtocol

__version__ = "1.0.0"

__all__ = [
    # Vehicles
    "Vehicle",
    "MotorVehicle",
    "CombustionVehicle",
    "ElectricVehicle",
    "Bicycle",
    # Protocols
    "VehicleProtocol",
    "MotorVehicleProtocol",
    # Demo driver
    "drive",
    "start_and_drive",
    "run_demo",
    "run_noncomplying_demo",
    # Exceptions
    "VehicleError",
    "UnsupportedOperationError",
    # Logging
    "LogLevel",
    "LogComponent",
    "configure_logging",
    "get_logger",
]
