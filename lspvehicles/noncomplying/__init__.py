"""
Vehicle classes for the noncomplying design.

Bicycle.start_motor always raises UnsupportedOperationError. Use
lspvehicles.complying for the corrected hierarchy.
"""

from .vehicle import Bicycle, CombustionVehicle, ElectricVehicle, Vehicle

__all__ = ["Vehicle", "CombustionVehicle", "ElectricVehicle", "Bicycle"]
