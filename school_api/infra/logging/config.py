"""Logging configuration setup.

Provides production-ready logging configuration using:
- dictConfig for logger levels
- QueueHandler + QueueListener for non-blocking I/O
- ContextInjectingFilter for automatic context propagation
- All handlers behind the root logger (child loggers propagate)
- JSONL format for machine parsing
"""

from __future__ import annotations

import atexit
import logging
import logging.config
from logging.handlers import QueueHandler, QueueListener, RotatingFileHandler
from pathlib import Path
from queue import Queue
from typing import TYPE_CHECKING, Any

from .context import ContextInjectingFilter
from .formatters import JSONFormatter

if TYPE_CHECKING:
    from school_api.core.settings.logs import LoggingSettings

_log_queue: Queue[logging.LogRecord] | None = None
_listener: QueueListener | None = None
_queue_handler: QueueHandler | None = None
_LOGGING_INITIALIZED = False

logger = logging.getLogger(__name__)

TEXT_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
TEXT_DATEFMT = "%Y-%m-%d %H:%M:%S"


def shutdown() -> None:
    """Stop the QueueListener, flushing pending records.

    Registered with atexit, and also called from the application lifespan.
    """
    global _listener, _log_queue, _queue_handler

    if _listener is not None:
        _listener.stop()
        _listener = None

    if _queue_handler is not None:
        logging.getLogger().removeHandler(_queue_handler)
        _queue_handler = None

    _log_queue = None


def setup_logging(
    log_settings: LoggingSettings | None = None,
    *,
    force: bool = False,
    **configure_kwargs: Any,
) -> None:
    """Ensure logging is configured once across entrypoints.

    Args:
        log_settings: Optional logging settings instance. If omitted, settings
            are loaded via get_logging_settings().
        force: Reconfigure logging even if it was already initialized.
        **configure_kwargs: Explicit overrides for configure_logging().
    """
    global _LOGGING_INITIALIZED

    if _LOGGING_INITIALIZED and not force:
        return

    if log_settings is None:
        from school_api.core.settings import get_logging_settings

        log_settings = get_logging_settings()

    log_config = {**log_settings.to_logging_kwargs(), **configure_kwargs}

    configure_logging(**log_config)
    _LOGGING_INITIALIZED = True


def configure_logging(
    service_name: str = "school-api",
    log_level: str = "INFO",
    json_logs: bool = True,
    console_enabled: bool = True,
    file_path: str | Path | None = None,
    file_max_bytes: int = 10 * 1024 * 1024,
    file_backup_count: int = 5,
    include_context: bool = True,
    capture_warnings: bool = True,
    include_uvicorn: bool = True,
) -> None:
    """Configure logging with dictConfig and the QueueHandler pattern.

    Args:
        service_name: Static ``service`` field added to JSON records.
        log_level: Root logger level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_logs: Enable JSONL structured logging instead of plain text.
        console_enabled: Enable the stderr handler.
        file_path: Path of the rotating log file, or None to disable it.
        file_max_bytes: Maximum log file size before rotation.
        file_backup_count: Number of rotated log files to keep.
        include_context: Attach ContextInjectingFilter.
        capture_warnings: Forward Python warnings to logging.
        include_uvicorn: Keep uvicorn's access log; otherwise it is silenced.
    """
    shutdown()

    logging.captureWarnings(capture_warnings)

    formatter_name = "json" if json_logs else "text"
    logging_config: dict[str, Any] = {
        "version": 1,
        "disable_existing_loggers": False,
        "root": {"level": log_level.upper(), "handlers": []},
        "loggers": {
            "uvicorn.access": {
                "level": "INFO" if include_uvicorn else "WARNING",
                "handlers": [],
                "propagate": True,
            },
            # uvicorn installs its own handlers; route everything through root
            "uvicorn": {"handlers": [], "propagate": True},
            "uvicorn.error": {"handlers": [], "propagate": True},
        },
    }

    logging.config.dictConfig(logging_config)

    handlers: list[logging.Handler] = []
    if console_enabled:
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(_make_formatter(formatter_name, service_name))
        handlers.append(console_handler)

    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=file_max_bytes,
            backupCount=file_backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(_make_formatter(formatter_name, service_name))
        handlers.append(file_handler)

    _setup_queue_logging(handlers, include_context=include_context)

    logger.debug(
        "Logging configured",
        extra={"log_level": log_level, "json_logs": json_logs, "handlers": len(handlers)},
    )


def _make_formatter(name: str, service_name: str) -> logging.Formatter:
    if name == "json":
        return JSONFormatter(static={"service": service_name})
    return logging.Formatter(fmt=TEXT_FORMAT, datefmt=TEXT_DATEFMT)


def _setup_queue_logging(handlers: list[logging.Handler], *, include_context: bool) -> None:
    """Attach a QueueHandler to the root logger and start the listener.

    The context filter sits on the QueueHandler: it runs in the emitting task,
    where the contextvars are visible, and sees records from every logger.
    """
    global _log_queue, _listener, _queue_handler

    _log_queue = Queue()
    _queue_handler = QueueHandler(_log_queue)
    if include_context:
        _queue_handler.addFilter(ContextInjectingFilter())

    if handlers:
        _listener = QueueListener(_log_queue, *handlers, respect_handler_level=True)
        _listener.start()
        atexit.register(shutdown)

    logging.getLogger().addHandler(_queue_handler)
