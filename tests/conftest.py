"""
Pytest configuration and fixtures for lspvehicles tests.

configure_logging() detaches the package logger from the root logger; the
autouse fixture below undoes that after each test so caplog keeps working.
"""

from __future__ import annotations

import logging
from typing import Callable, List

import pytest

from lspvehicles.log import ROOT_LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_package_logging():
    """Restore the package root logger after each test."""
    yield
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)
    root_logger.propagate = True


@pytest.fixture
def stdout_lines(capsys) -> Callable[[], List[str]]:
    """Return a callable giving the lines printed to stdout so far."""

    def _read() -> List[str]:
        return capsys.readouterr().out.splitlines()

    return _read
