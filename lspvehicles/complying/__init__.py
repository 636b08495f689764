"""
Vehicle classes for the complying design.

Re-exports all vehicle classes for convenient imports.
"""

from .vehicle import (
    Bicycle,
    CombustionVehicle,
    ElectricVehicle,
    MotorVehicle,
    Vehicle,
)

__all__ = [
    "Vehicle",
    "MotorVehicle",
    "CombustionVehicle",
    "ElectricVehicle",
    "Bicycle",
]
