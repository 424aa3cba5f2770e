"""
Logging setup.

Configures the root logger with either a human-readable text formatter or a
JSON formatter, optionally adding a rotating file handler.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from logging import Handler
from logging.handlers import RotatingFileHandler
from typing import Any, Dict, List, Literal, Optional

from constants import LoggingConfig

# Type alias for log levels
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class JSONFormatter(logging.Formatter):
    """One JSON object per record, carrying the node address and kind when logged."""

    EXTRA_FIELDS = ("address", "kind")

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc).strftime(
            LoggingConfig.JSON_DATE_FORMAT
        )
        payload: Dict[str, Any] = {
            "timestamp": timestamp,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in self.EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = str(getattr(record, key))

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False)


_MANAGED_HANDLERS: List[Handler] = []


def _clear_managed_handlers() -> None:
    """Remove handlers that were added by this module."""
    root_logger = logging.getLogger()
    for handler in _MANAGED_HANDLERS:
        root_logger.removeHandler(handler)
        handler.close()
    _MANAGED_HANDLERS.clear()


def setup_logging(
    level: LogLevel = LoggingConfig.DEFAULT_LOG_LEVEL,
    log_file: Optional[str] = None,
    *,
    structured: bool = False,
) -> None:
    """
    Configure the root logger.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        level: Log level name.
        log_file: Optional path of a rotating log file.
        structured: Emit one JSON object per record instead of text.
    """
    log_level = getattr(logging, str(level).upper(), logging.INFO)

    formatter: logging.Formatter
    if structured:
        formatter = JSONFormatter()
    else:
        formatter = logging.Formatter(
            fmt=LoggingConfig.LOG_FORMAT, datefmt=LoggingConfig.DATE_FORMAT
        )

    handlers: List[Handler] = []
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    handlers.append(console_handler)

    if log_file:
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=LoggingConfig.MAX_LOG_FILE_MB * 1024 * 1024,
            backupCount=LoggingConfig.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    _clear_managed_handlers()
    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    for handler in handlers:
        root_logger.addHandler(handler)
        _MANAGED_HANDLERS.append(handler)

    logging.getLogger(__name__).debug(f"Logging configured at {logging.getLevelName(log_level)}")
