"""Structured Logging — JSON formatter, setup and call tracing for observability.

Invariants:
    - All logs include timestamp, level, logger name, and message
    - Extra fields (operation, error_code, path, id_number, duration_ms) surfaced when present
    - JSON format in production, human-readable in development
    - log_call never alters the wrapped function's result or exception

Design Decisions:
    - JSONFormatter on stdlib logging: no extra dependency
    - setup_logging called once on startup via lifespan
    - Entry/exit logging as a decorator on service methods, not inside core/
"""

import functools
import json
import logging
import time
from datetime import datetime, timezone

from client_registry.core.errors import RegistryError

EXTRA_FIELDS = (
    "operation", "error_code", "path", "id_number", "duration_ms",
)


class JSONFormatter(logging.Formatter):
    """Format logs as JSON for structured logging in production."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json"):
    """Configure logging for the application."""
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s — %(message)s",
        ))
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))


def log_call(layer: str):
    """Decorator: log entry, success and failure of a method call.

    RegistryError is an expected outcome (WARNING, no traceback);
    anything else is logged at ERROR with the traceback. The exception
    is always re-raised unchanged.
    """

    def decorator(func):
        logger = logging.getLogger(func.__module__)
        operation = f"{layer}.{func.__qualname__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            logger.info(
                f"{layer} - entering {func.__qualname__}",
                extra={"operation": operation},
            )
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except RegistryError as e:
                logger.warning(
                    f"{layer} - {func.__qualname__} failed: {e.message}",
                    extra={
                        "operation": operation, "error_code": e.code,
                        "duration_ms": _elapsed_ms(start),
                    },
                )
                raise
            except Exception as e:
                logger.error(
                    f"{layer} - {func.__qualname__} raised: {e}",
                    extra={
                        "operation": operation,
                        "duration_ms": _elapsed_ms(start),
                    },
                    exc_info=True,
                )
                raise
            logger.info(
                f"{layer} - {func.__qualname__} succeeded",
                extra={
                    "operation": operation,
                    "duration_ms": _elapsed_ms(start),
                },
            )
            return result

        return wrapper

    return decorator


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 3)
