"""
Logging utilities for lspvehicles.

Uses Python's standard logging with a colored console formatter.
Shared by the complying and noncomplying packages and the demo driver.
"""

from __future__ import annotations

import logging
import sys
import time
from enum import Enum
from typing import Optional, Union

ROOT_LOGGER_NAME = "lspvehicles"


class LogLevel(Enum):
    """Log level enumeration matching Python logging."""

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    CRITICAL = logging.CRITICAL

    @classmethod
    def from_string(cls, level: str) -> "LogLevel":
        """Convert string to LogLevel."""
        level_upper = level.upper()
        if level_upper == "WARN":
            level_upper = "WARNING"
        return cls[level_upper]


class LogComponent(Enum):
    """Logger names, one per part of the package."""

    ROOT = ROOT_LOGGER_NAME
    COMPLYING = "lspvehicles.complying"
    NONCOMPLYING = "lspvehicles.noncomplying"
    DEMO = "lspvehicles.demo"


class ColoredFormatter(logging.Formatter):
    """Console formatter that tags each record with its short logger name."""

    COLORS = {
        logging.DEBUG: "\033[36m",  # Cyan
        logging.INFO: "\033[32m",  # Green
        logging.WARNING: "\033[33m",  # Yellow
        logging.ERROR: "\033[31m",  # Red
        logging.CRITICAL: "\033[35m",  # Magenta
    }
    RESET = "\033[0m"
    BOLD = "\033[1m"

    def __init__(
        self,
        fmt: Optional[str] = None,
        datefmt: Optional[str] = None,
        use_colors: bool = True,
    ):
        super().__init__(fmt, datefmt)
        self.use_colors = use_colors and sys.stdout.isatty()

    @staticmethod
    def short_name(name: str) -> str:
        """'lspvehicles.complying' -> 'complying', 'lspvehicles' -> 'lspvehicles'."""
        prefix = ROOT_LOGGER_NAME + "."
        if name.startswith(prefix):
            return name[len(prefix):]
        return name

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, "") if self.use_colors else ""
        reset = self.RESET if self.use_colors else ""
        bold = self.BOLD if self.use_colors else ""

        name = self.short_name(record.name)
        level_letter = record.levelname[0]

        if record.levelno >= logging.WARNING:
            prefix = f"{color}{bold}[{name} {level_letter}]{reset}"
        else:
            prefix = f"{color}[{name}]{reset}"

        if record.levelno == logging.DEBUG:
            timestamp = time.strftime("%H:%M:%S", time.localtime(record.created))
            return f"{prefix} {color}{timestamp}{reset} {record.getMessage()}"
        return f"{prefix} {record.getMessage()}"


_configured = False
_default_format = "[%(name)s] %(message)s"


def _level_value(level: Union[LogLevel, str, int]) -> int:
    if isinstance(level, LogLevel):
        return level.value
    if isinstance(level, str):
        return LogLevel.from_string(level).value
    return level


def configure_logging(
    level: Union[LogLevel, str, int] = LogLevel.INFO,
    format_str: Optional[str] = None,
    use_colors: bool = True,
    log_file: Optional[str] = None,
    root_name: str = ROOT_LOGGER_NAME,
) -> None:
    """
    Configure logging for lspvehicles.

    Calling it again replaces the handlers installed by the previous call.

    Args:
        level: Log level (LogLevel enum, string, or int)
        format_str: Custom format string (uses default if None)
        use_colors: Use colored output for console
        log_file: Optional path to log file
        root_name: Logger name to configure (default: lspvehicles)
    """
    global _configured

    level_value = _level_value(level)
    fmt = format_str or _default_format

    root_logger = logging.getLogger(root_name)
    root_logger.setLevel(level_value)
    root_logger.handlers.clear()
    root_logger.propagate = False

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level_value)
    console.setFormatter(ColoredFormatter(fmt, use_colors=use_colors))
    root_logger.addHandler(console)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(level_value)
        file_handler.setFormatter(logging.Formatter(fmt))
        root_logger.addHandler(file_handler)

    _configured = True


def is_configured() -> bool:
    return _configured


def get_logger(
    component: Union[LogComponent, str] = LogComponent.ROOT,
) -> logging.Logger:
    """
    Get a logger for the specified component.

    Args:
        component: LogComponent enum value or string logger name.

    Returns:
        A logging.Logger instance.
    """
    name = component.value if isinstance(component, LogComponent) else component
    return logging.getLogger(name)


def set_level(
    level: Union[LogLevel, str, int],
    component: Optional[LogComponent] = None,
) -> None:
    """Set the log level for a component or the package root logger."""
    logger_name = component.value if component else ROOT_LOGGER_NAME
    logging.getLogger(logger_name).setLevel(_level_value(level))


__all__ = [
    "LogLevel",
    "LogComponent",
    "ColoredFormatter",
    "configure_logging",
    "is_configured",
    "get_logger",
    "set_level",
]
