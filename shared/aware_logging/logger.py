"""
AwareLogger - structured logging for aware components.

Wraps a stdlib logger so that keyword arguments on each call become
structured fields on the emitted record.
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from .formatters import ConsoleFormatter, JsonFormatter


LOG_LEVEL_ENV = "AWARE_LOG_LEVEL"
LOG_FORMAT_ENV = "AWARE_LOG_FORMAT"


def _resolve_level(level: int | str) -> int:
    """Map a level name such as "debug" to its numeric value.

    Raises:
        ValueError: If the name is not a registered logging level
    """
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level!r}")
    return resolved


def _level_from_env(default: int | str) -> int:
    """Return the AWARE_LOG_LEVEL level, or the default if unset or unknown."""
    env_level = os.environ.get(LOG_LEVEL_ENV)
    if env_level:
        try:
            return _resolve_level(env_level)
        except ValueError:
            pass
    return _resolve_level(default)


class AwareLogger:
    """Structured logger.

    Usage:
        from aware_logging import get_logger

        logger = get_logger("aware-config", component="loader")
        logger.info("Loaded config request", source="environment")
    """

    def __init__(
        self,
        name: str,
        level: int | str = logging.INFO,
        component: str | None = None,
        json_format: bool | None = None,
    ):
        """Initialize the logger.

        Args:
            name: Logger name (typically the tool or service name)
            level: Log level (default INFO, overridden by AWARE_LOG_LEVEL when
                that names a known level; unknown names are ignored)
            component: Optional component within the service
            json_format: Emit JSON lines instead of console text. When None,
                JSON is used if AWARE_LOG_FORMAT is "json".
        """
        self.name = name
        self.component = component
        logger_name = f"{name}.{component}" if component else name
        self._logger = logging.getLogger(logger_name)
        self._logger.propagate = False
        self._stream_handler: logging.Handler | None = None

        if json_format is None:
            json_format = os.environ.get(LOG_FORMAT_ENV, "").lower() == "json"
        self._initial_level = _level_from_env(level)
        self._initial_json_format = json_format

        self._logger.setLevel(self._initial_level)
        self.json_format = json_format

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: int | str) -> None:
        self._logger.setLevel(_resolve_level(level))

    def set_json_format(self, json_format: bool) -> None:
        """Switch stderr output between JSON lines and console text."""
        if json_format == self.json_format:
            return
        self.json_format = json_format
        if self._stream_handler is not None:
            self._stream_handler.setFormatter(self._make_formatter())

    def _make_formatter(self) -> logging.Formatter:
        if self.json_format:
            return JsonFormatter(service=self.name, component=self.component)
        return ConsoleFormatter(service=self.name)

    def _ensure_handlers(self) -> None:
        """Attach the stderr handler on first use."""
        if self._stream_handler is not None:
            return

        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(self._make_formatter())
        self._logger.addHandler(handler)
        self._stream_handler = handler

    def reset(self) -> None:
        """Remove all handlers and restore the initial level and format."""
        for handler in list(self._logger.handlers):
            self._logger.removeHandler(handler)
            handler.close()
        self._stream_handler = None
        self._logger.setLevel(self._initial_level)
        self.json_format = self._initial_json_format

    def _log(self, level: int, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._ensure_handlers()
        self._logger.log(level, msg, *args, exc_info=exc_info, extra=kwargs)

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a debug message."""
        self._log(logging.DEBUG, msg, *args, **kwargs)

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an info message."""
        self._log(logging.INFO, msg, *args, **kwargs)

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log a warning message."""
        self._log(logging.WARNING, msg, *args, **kwargs)

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        """Log an error message."""
        self._log(logging.ERROR, msg, *args, exc_info=exc_info, **kwargs)

    def exception(self, msg: str, *args: Any, **kwargs: Any) -> None:
        """Log an exception (includes stack trace)."""
        self._log(logging.ERROR, msg, *args, exc_info=True, **kwargs)

    def add_file_handler(
        self,
        log_file: str | Path,
        level: int = logging.DEBUG,
        max_bytes: int = 10 * 1024 * 1024,  # 10 MB
        backup_count: int = 5,
    ) -> None:
        """Add a rotating file handler with JSON formatting."""
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(JsonFormatter(service=self.name, component=self.component))

        self._ensure_handlers()
        self._logger.addHandler(file_handler)

    def with_context(self, **kwargs: Any) -> "BoundLogger":
        """Create a bound logger whose fields are added to every call."""
        return BoundLogger(self, kwargs)


class BoundLogger:
    """Logger bound to specific structured fields."""

    def __init__(self, parent: AwareLogger, bound_fields: dict[str, Any]):
        self._parent = parent
        self._bound_fields = bound_fields

    def _merge_kwargs(self, kwargs: dict[str, Any]) -> dict[str, Any]:
        result = dict(self._bound_fields)
        result.update(kwargs)
        return result

    def debug(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.debug(msg, *args, **self._merge_kwargs(kwargs))

    def info(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.info(msg, *args, **self._merge_kwargs(kwargs))

    def warning(self, msg: str, *args: Any, **kwargs: Any) -> None:
        self._parent.warning(msg, *args, **self._merge_kwargs(kwargs))

    def error(self, msg: str, *args: Any, exc_info: Any = None, **kwargs: Any) -> None:
        self._parent.error(msg, *args, exc_info=exc_info, **self._merge_kwargs(kwargs))

    def with_context(self, **kwargs: Any) -> "BoundLogger":
        return BoundLogger(self._parent, self._merge_kwargs(kwargs))


_loggers: dict[str, AwareLogger] = {}


def get_logger(
    name: str,
    level: int | str = logging.INFO,
    component: str | None = None,
) -> AwareLogger:
    """Get or create a logger by name.

    Loggers are cached by (name, component), so repeated calls return the
    same instance.
    """
    key = f"{name}:{component or ''}"

    if key not in _loggers:
        _loggers[key] = AwareLogger(name, level, component)

    return _loggers[key]


def configure_logging(
    level: int | str | None = None,
    json_format: bool | None = None,
    log_file: str | Path | None = None,
) -> None:
    """Reconfigure every cached logger.

    Used by command-line entry points after parsing their options.

    Args:
        level: New level for all loggers
        json_format: Switch stderr output between JSON and console text
        log_file: Also write JSON lines to this file
    """
    for logger in _loggers.values():
        if level is not None:
            logger.set_level(level)
        if json_format is not None:
            logger.set_json_format(json_format)
        if log_file is not None:
            logger.add_file_handler(log_file)


def reset_loggers() -> None:
    """Restore every cached logger to its initial state, without handlers.

    Primarily useful for testing.
    """
    for logger in _loggers.values():
        logger.reset()
