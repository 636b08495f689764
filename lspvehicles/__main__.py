"""
Runs the lspvehicles demo.

usage:
    python -m lspvehicles

The complying demo runs first, then the noncomplying one, whose bicycle
fails when asked to start a motor.
"""

from lspvehicles.demo import run_demo, run_noncomplying_demo
from lspvehicles.log import LogComponent, configure_logging, get_logger

logger = get_logger(LogComponent.ROOT)


def main():
    """Main entry point for the lspvehicles demo."""
    configure_logging()

    logger.info("Complying design: start_motor lives on MotorVehicle")
    run_demo()

    logger.info("Noncomplying design: start_motor lives on Vehicle")
    broken = run_noncomplying_demo()
    if broken:
        logger.warning(f"Vehicles that could not be substituted: {', '.join(broken)}")


if __name__ == "__main__":
    main()
