"""
Exception hierarchy for lspvehicles.

Only the noncomplying vehicles raise; the complying hierarchy is built so
that every operation a vehicle exposes always succeeds.

Example:
    from lspvehicles.exceptions import UnsupportedOperationError
    from lspvehicles.noncomplying import Bicycle

    try:
        Bicycle("BMX Bike").start_motor()
    except UnsupportedOperationError as e:
        print(f"Substitution broke: {e}")
"""

from __future__ import annotations

from typing import Optional


class VehicleError(Exception):
    """
    Base exception for all lspvehicles errors.

    Attributes:
        message: Human-readable error description
        original_error: Underlying exception, if this one wraps another
    """

    def __init__(self, message: str, original_error: Optional[BaseException] = None):
        super().__init__(message)
        self.message = message
        self.original_error = original_error

    def __str__(self) -> str:
        if self.original_error is not None:
            return f"{self.message} (caused by: {self.original_error})"
        return self.message


class UnsupportedOperationError(VehicleError, NotImplementedError):
    """Raised when a vehicle is asked for a capability it does not have."""

    def __init__(
        self,
        operation: str,
        vehicle_name: str,
        original_error: Optional[BaseException] = None,
    ):
        super().__init__(
            f"{operation} is not supported by {vehicle_name}",
            original_error=original_error,
        )
        self.operation = operation
        self.vehicle_name = vehicle_name


__all__ = ["VehicleError", "UnsupportedOperationError"]
