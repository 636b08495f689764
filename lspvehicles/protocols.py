"""
Capability protocols for lspvehicles.

A vehicle's capability set is decided by which protocol it satisfies:

- VehicleProtocol: identity, accelerate, stop. Every vehicle can do these.
- MotorVehicleProtocol: everything above plus start_motor. Only vehicles
  that really have a motor may satisfy it.

Callers type their parameters against the narrowest protocol they need, so
a Bicycle can be passed wherever a VehicleProtocol is expected but never
where a MotorVehicleProtocol is.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class VehicleProtocol(Protocol):
    """Operations every vehicle can perform without failing."""

    @property
    def name(self) -> str:
        ...

    def get_name(self) -> str:
        ...

    def accelerate(self) -> None:
        ...

    def stop(self) -> None:
        ...


@runtime_checkable
class MotorVehicleProtocol(VehicleProtocol, Protocol):
    """Vehicles that can start a motor."""

    def start_motor(self) -> None:
        ...


__all__ = ["VehicleProtocol", "MotorVehicleProtocol"]
