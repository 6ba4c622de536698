"""
Configuration & Global Options
==============================
This module serves as the central registry for package-wide options.

Why is this file needed?
------------------------
1. Abstraction: It prevents option lookups (environment variables, defaults)
   from being scattered throughout the code.
2. Deployment: Options can be changed from the environment without touching
   the code, e.g. ``GEOMLAYER_LOG_LEVEL=DEBUG``.

Exports:
    LOGGER_NAME (str): Root logger namespace of the package.
    LOG_LEVEL (int): Logging level used by ``setup_logging`` by default.
    DEFAULT_NA_RM (bool): Value of ``na_rm`` when a layer does not set one.
"""
import logging
import os


def get_log_level(default: str = "WARNING") -> int:
    """
    Resolve the logging level from the ``GEOMLAYER_LOG_LEVEL`` variable.
    """
    name = os.environ.get("GEOMLAYER_LOG_LEVEL", default).upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        # Unknown names come back as "Level <name>"
        return logging.getLevelName(default)
    return level


def _get_bool(variable: str, default: bool) -> bool:
    value = os.environ.get(variable)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# Global Constants
LOGGER_NAME: str = "geomlayer"
LOG_LEVEL: int = get_log_level()
DEFAULT_NA_RM: bool = _get_bool("GEOMLAYER_NA_RM", False)
