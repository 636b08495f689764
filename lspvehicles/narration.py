"""
Narration output for vehicle actions.

Each action prints one human-readable line, "<verb> <name>", to stdout.
"""

from __future__ import annotations

import logging


def narrate(verb: str, name: str, logger: logging.Logger) -> str:
    """Print the narration line for an action and return it."""
    line = f"{verb} {name}"
    print(line)
    logger.debug(line)
    return line
