"""
Structured logging configuration.

linarith never configures logging on import; applications call
``setup_logging()`` (or configure the ``linarith`` logger themselves).
"""

import sys
import logging
from typing import Any, Dict, Optional
from datetime import datetime, timezone
import json
from pathlib import Path

from .config import Settings, get_settings


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, context logger data merged in at top level"""

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}.{record.funcName}:{record.lineno}",
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        log_data.update(getattr(record, "extra_data", None) or {})

        # arithmetic values (Fraction, Decimal, SymPy) are rendered with str()
        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text log formatter"""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S"
        )

    def format(self, record: logging.LogRecord) -> str:
        """Format log record, appending context logger data as key=value pairs"""
        text = super().format(record)
        extra_data = getattr(record, "extra_data", None)
        if extra_data:
            text += " [" + ", ".join(f"{key}={value}" for key, value in extra_data.items()) + "]"
        return text


def setup_logging(config: Optional[Settings] = None) -> logging.Logger:
    """Configure the ``linarith`` logger from settings and return it"""
    config = config or get_settings()

    log_level = getattr(logging, config.LOG_LEVEL.upper(), logging.WARNING)

    if config.LOG_FORMAT == "json":
        formatter: logging.Formatter = StructuredFormatter()
    else:
        formatter = TextFormatter()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    handlers: list[logging.Handler] = [console_handler]

    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        handlers.append(file_handler)

    # Only the package logger is touched, the root logger belongs to the application
    logger = logging.getLogger("linarith")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    for handler in handlers:
        logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False
    return logger


def get_logger(name: str) -> logging.Logger:
    """Get logger instance"""
    return logging.getLogger(name)


class LoggerAdapter(logging.LoggerAdapter):
    """
    Logger carrying a fixed context, e.g. the shape of the system a solver works on.

    Per-call context is passed as ``extra_data`` and wins over the fixed context.
    Both end up in ``record.extra_data`` where the formatters pick them up.
    """

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        call_data = kwargs.pop("extra_data", None) or {}
        kwargs.setdefault("extra", {})["extra_data"] = {**self.extra, **call_data}
        return msg, kwargs


def get_context_logger(name: str, **context) -> LoggerAdapter:
    """Logger for ``name`` that attaches ``context`` to every record"""
    return LoggerAdapter(get_logger(name), context)
