"""
Example showing substitution with the complying vehicles.

fleet_report() only needs VehicleProtocol, so it accepts every vehicle.
Only the vehicles that satisfy MotorVehicleProtocol get their motor started.

Usage:
    python -m examples.basic_example
"""
from typing import Iterable

from lspvehicles import (
    Bicycle,
    CombustionVehicle,
    ElectricVehicle,
    LogComponent,
    LogLevel,
    MotorVehicleProtocol,
    VehicleProtocol,
    configure_logging,
    drive,
    get_logger,
    start_and_drive,
)

configure_logging(level=LogLevel.INFO)
logger = get_logger(LogComponent.DEMO)


def fleet_report(fleet: Iterable[VehicleProtocol]) -> None:
    for vehicle in fleet:
        if isinstance(vehicle, MotorVehicleProtocol):
            logger.info(f"{vehicle.get_name()} has a motor")
            start_and_drive(vehicle)
        else:
            logger.info(f"{vehicle.get_name()} is pedal powered")
            drive(vehicle)


if __name__ == "__main__":
    fleet_report([
        CombustionVehicle("Pickup Ford"),
        Bicycle("Road Bike"),
        ElectricVehicle("Leaf Nissan"),
    ])
