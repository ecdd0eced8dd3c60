"""Logging configuration for the command line interface."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Operation log, appended to in the working directory when log_operations is on
OPERATION_LOG_FILE = "vault-creation.log"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Handlers installed by this module, replaced on reconfiguration
_handlers: list[logging.Handler] = []


@dataclass(frozen=True)
class LoggingSettings:
    """Logging choices made once at startup."""

    level: str = "INFO"
    log_file: Optional[Path] = None


def _formatter() -> logging.Formatter:
    return logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)


def _install(handler: logging.Handler, level: str) -> logging.Handler:
    handler.setLevel(getattr(logging, level.upper()))
    handler.setFormatter(_formatter())
    logging.getLogger().addHandler(handler)
    _handlers.append(handler)
    return handler


def reset_logging() -> None:
    """Remove and close handlers installed by configure_logging."""
    root_logger = logging.getLogger()
    while _handlers:
        handler = _handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()


def configure_logging(settings: LoggingSettings) -> None:
    """Set up the root logger: console at the requested level, optional log file."""
    reset_logging()

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # Capture everything, handlers filter

    _install(logging.StreamHandler(), settings.level)

    # Suppress datalad console chatter
    logging.getLogger("datalad").setLevel(logging.WARNING)

    if settings.log_file is not None:
        attach_operation_log(settings.log_file, settings.level)


def attach_operation_log(log_file: Path, level: str = "INFO") -> logging.Handler:
    """Append log records to log_file as "TIMESTAMP [LEVEL] MESSAGE" lines.

    Returns:
        The attached handler
    """
    return _install(logging.FileHandler(log_file, mode="a", encoding="utf-8"), level)
