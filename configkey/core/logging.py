"""
configkey.core.logging

Logging helpers. Library modules log through module loggers at DEBUG;
only entry points install handlers.
"""

import logging
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module (pass __name__)."""
    return logging.getLogger(name)


def configure_logging(
    level: str = "WARNING",
    fmt: Optional[str] = None,
    stream=None,
) -> logging.Logger:
    """Install a single stream handler on the package logger.
    
    Calling this again replaces the previous handler, so entry points
    can reconfigure without stacking duplicate output.
    
    Args:
        level: Level name (DEBUG, INFO, WARNING, ...).
        fmt: Format string. Defaults to DEFAULT_FORMAT.
        stream: Output stream. Defaults to stderr.
    
    Returns:
        The configured package logger.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")
    
    package_logger = logging.getLogger("configkey")
    for handler in list(package_logger.handlers):
        if getattr(handler, "_configkey_handler", False):
            package_logger.removeHandler(handler)
    
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    handler._configkey_handler = True
    
    package_logger.addHandler(handler)
    package_logger.setLevel(numeric_level)
    return package_logger
