"""
aware_logging - Structured logging for aware components.

Usage:
    from aware_logging import get_logger

    logger = get_logger("aware-config", component="loader")
    logger.info("Loaded config request", source="environment")

    bound = logger.with_context(path="/etc/aware.yaml")
    bound.debug("Parsing file")

Environment:
    AWARE_LOG_LEVEL   Overrides the default level (DEBUG, INFO, ...)
    AWARE_LOG_FORMAT  "json" for one JSON object per line on stderr
"""

from .formatters import ConsoleFormatter, JsonFormatter
from .logger import AwareLogger, BoundLogger, configure_logging, get_logger, reset_loggers


__all__ = [
    "AwareLogger",
    "BoundLogger",
    "ConsoleFormatter",
    "JsonFormatter",
    "configure_logging",
    "get_logger",
    "reset_loggers",
]

__version__ = "0.1.0"
