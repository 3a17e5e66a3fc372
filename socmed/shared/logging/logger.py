"""loguru setup for the auth service.

Every record carries the request's correlation id; messages pass through
``sanitize_record`` before reaching any sink.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_LINE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_NO_REQUEST = "-"
_request_id: ContextVar[str] = ContextVar("socmed_request_id", default=_NO_REQUEST)

_logger.configure(extra={"correlation_id": _NO_REQUEST})


def _default_log_file() -> str:
    configured = os.getenv("LOG_FILE")
    if configured:
        return configured
    instance_dir = os.path.abspath(os.path.join(os.path.dirname(__file__), "../../instance"))
    return os.path.join(instance_dir, "socmed.log")


class _StdlibBridge(logging.Handler):
    """Forwards stdlib records (werkzeug, sqlalchemy) into loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_request_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class _RequestBoundLogger:
    def __getattr__(self, name: str) -> Any:  # pragma: no cover
        return getattr(_logger.bind(correlation_id=_request_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _request_id.set(value or _NO_REQUEST)


def clear_correlation_id() -> None:
    _request_id.set(_NO_REQUEST)


def setup_logging(level: str | None = None, *, debug_mode: bool = False) -> None:
    level = (level or os.getenv("LOG_LEVEL") or ("DEBUG" if debug_mode else "INFO")).upper()
    log_file = _default_log_file()
    os.makedirs(os.path.dirname(log_file), exist_ok=True)

    sink_options: dict[str, Any] = {
        "level": level,
        "format": _LINE_FORMAT,
        "filter": sanitize_record,
        "backtrace": False,
        "diagnose": False,
    }
    _logger.remove()
    _logger.add(sys.stderr, colorize=True, **sink_options)
    _logger.add(log_file, enqueue=True, encoding="utf-8", **sink_options)

    logging.basicConfig(handlers=[_StdlibBridge()], level=0, force=True)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = _RequestBoundLogger()

__all__ = [
    "clear_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
