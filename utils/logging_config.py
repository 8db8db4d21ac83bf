"""Logging setup for the reviewer pipeline and the API server.

Level, format, log file rotation and the list of third-party loggers held
at WARNING all come from Config. The API lifespan and run_api call
setup_logging() once at startup; pipeline modules only ask for named
loggers and never install handlers themselves.

Created: 2026-10-12
Version: 1.0.0
License: MIT
"""

import logging
import sys
import time
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional

from .config import config


_configured = False
_installed_handlers: List[logging.Handler] = []


def _file_handler(log_file: str, formatter: logging.Formatter) -> RotatingFileHandler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        path,
        maxBytes=config.LOG_MAX_BYTES,
        backupCount=config.LOG_BACKUP_COUNT,
        encoding="utf-8"
    )
    handler.setFormatter(formatter)
    return handler


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    force: bool = False
) -> None:
    """Install console and rotating file handlers on the root logger.

    Only handlers installed by an earlier call are replaced; handlers added
    by the host (uvicorn, pytest) are left alone.

    Args:
        level: Level name. Defaults to config.LOG_LEVEL.
        log_file: Log file path. Defaults to config.LOG_FILE; an empty
            string disables file logging.
        force: Reinstall even if logging was already set up.
    """
    global _configured

    if _configured and not force:
        return

    level_name = (level or config.LOG_LEVEL).upper()
    log_file = config.LOG_FILE if log_file is None else log_file
    formatter = logging.Formatter(config.LOG_FORMAT)

    root = logging.getLogger()
    for handler in _installed_handlers:
        root.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    console = logging.StreamHandler(sys.stdout)
    console.setFormatter(formatter)
    _installed_handlers.append(console)
    if log_file:
        _installed_handlers.append(_file_handler(log_file, formatter))

    for handler in _installed_handlers:
        root.addHandler(handler)
    root.setLevel(getattr(logging, level_name, logging.INFO))

    for name in config.QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    # LiteLLM prints through its own handler as well
    logging.getLogger("LiteLLM").propagate = False

    _configured = True
    destination = f" and {log_file}" if log_file else ""
    root.info(f"Logging at {level_name} to stdout{destination}")


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module."""
    return logging.getLogger(name)


def log_performance(logger: logging.Logger, operation: str, started_at: float, **details) -> float:
    """Log the time elapsed since ``started_at``.

    Args:
        logger: Logger to write to.
        operation: Human-readable operation name.
        started_at: Start timestamp from time.time().
        **details: Appended to the message as key=value pairs.

    Returns:
        Elapsed seconds.
    """
    elapsed = time.time() - started_at
    suffix = "".join(f" {key}={value}" for key, value in details.items())
    logger.info(f"{operation} took {elapsed:.2f}s{suffix}")
    return elapsed
