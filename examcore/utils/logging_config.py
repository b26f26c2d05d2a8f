"""Structured logging configuration for examcore."""

import json
import logging
import sys
import time
import traceback
from datetime import datetime, timezone
from functools import wraps
from pathlib import Path

_EXTRA_FIELDS = ("document", "question_number", "error_type", "duration_ms", "metrics")


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON.

        Args:
            record: Log record to format

        Returns:
            JSON-formatted log string
        """
        log_obj = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for name in _EXTRA_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                log_obj[name] = value

        if record.exc_info:
            log_obj["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": traceback.format_exception(*record.exc_info)
            }

        return json.dumps(log_obj, default=str)


def configure_logging(
    level: str = "INFO",
    log_file: str | None = None,
    structured: bool = True,
) -> None:
    """Configure root logging for the command-line tools.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR)
        log_file: Optional file path for logs
        structured: Whether to use structured JSON logging
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    if structured:
        formatter = StructuredFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers = []

    # stderr keeps stdout free for command output
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger("examcore").setLevel(log_level)


class LogContext:
    """Context manager that stamps every record with extra fields."""

    def __init__(self, document: str | None = None, **kwargs):
        self.context = {"document": document, **kwargs}
        self.old_factory = None

    def __enter__(self):
        old_factory = logging.getLogRecordFactory()

        def record_factory(*args, **kwargs):
            record = old_factory(*args, **kwargs)
            for key, value in self.context.items():
                if value is not None:
                    setattr(record, key, value)
            return record

        logging.setLogRecordFactory(record_factory)
        self.old_factory = old_factory
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.old_factory:
            logging.setLogRecordFactory(self.old_factory)


def log_performance(logger: logging.Logger | None = None):
    """Decorator to log function duration at DEBUG.

    Args:
        logger: Logger to use (defaults to the function's module logger)

    Returns:
        Decorated function
    """
    def decorator(func):
        log = logger or logging.getLogger(func.__module__)

        @wraps(func)
        def wrapper(*args, **kwargs):
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                duration_ms = (time.perf_counter() - start_time) * 1000
                log.debug(
                    f"Function {func.__name__} failed",
                    extra={"duration_ms": duration_ms, "error_type": type(e).__name__},
                )
                raise
            duration_ms = (time.perf_counter() - start_time) * 1000
            log.debug(
                f"Function {func.__name__} completed",
                extra={"duration_ms": duration_ms}
            )
            return result

        return wrapper
    return decorator
