"""
Log formatters for aware_logging.

Provides a JSON formatter for machine consumption and a console formatter
for interactive use.
"""

import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any


# LogRecord attributes that are never treated as structured fields
_STANDARD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "message",
        "taskName",
    }
)


def extract_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the structured fields passed to the log call."""
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_ATTRS and not key.startswith("_")
    }


class JsonFormatter(logging.Formatter):
    """One JSON object per line.

    Output format:
        {
            "timestamp": "2026-10-19T12:34:56.789Z",
            "severity": "INFO",
            "message": "Loaded config request",
            "service": "aware-config",
            "component": "loader",
            "extra": {"source": "environment"}
        }
    """

    def __init__(
        self,
        service: str = "aware",
        component: str | None = None,
        include_extra: bool = True,
    ):
        super().__init__()
        self.service = service
        self.component = component
        self.include_extra = include_extra

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record as JSON."""
        log_entry: dict[str, Any] = {
            "timestamp": self._format_timestamp(record),
            "severity": record.levelname,
            "message": record.getMessage(),
            "service": self.service,
        }

        if self.component:
            log_entry["component"] = self.component

        if record.name and record.name != self.service:
            log_entry["logger"] = record.name

        if self.include_extra:
            extra = extract_fields(record)
            if extra:
                log_entry["extra"] = extra

        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

        if record.levelno >= logging.WARNING:
            log_entry["sourceLocation"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        return json.dumps(log_entry, default=str, ensure_ascii=False)

    def _format_timestamp(self, record: logging.LogRecord) -> str:
        """Format timestamp in ISO 8601 format with UTC timezone."""
        dt = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return dt.strftime("%Y-%m-%dT%H:%M:%S.") + f"{int(dt.microsecond / 1000):03d}Z"


class ConsoleFormatter(logging.Formatter):
    """Human-readable console formatter.

    Output format:
        2026-10-19 12:34:56 [INFO    ] aware-config: Loaded config request (source=environment)
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        service: str = "aware",
        use_colors: bool | None = None,
        show_fields: bool = True,
    ):
        super().__init__()
        self.service = service
        self.use_colors = use_colors if use_colors is not None else self._detect_color_support()
        self.show_fields = show_fields

    def _detect_color_support(self) -> bool:
        """Detect if stderr is a terminal that accepts colors."""
        if not hasattr(sys.stderr, "isatty") or not sys.stderr.isatty():
            return False

        if os.environ.get("NO_COLOR"):
            return False

        return True

    def format(self, record: logging.LogRecord) -> str:
        """Format the log record for console output."""
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S")

        level = f"{record.levelname:8}"
        if self.use_colors:
            level = f"{self.COLORS.get(record.levelname, '')}{level}{self.RESET}"

        message = f"{timestamp} [{level}] {self.service}: {record.getMessage()}"

        if self.show_fields:
            fields = extract_fields(record)
            if fields:
                field_str = " ".join(f"{key}={value}" for key, value in fields.items())
                if self.use_colors:
                    message += f" \033[90m({field_str})\033[0m"
                else:
                    message += f" ({field_str})"

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message
