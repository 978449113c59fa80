from __future__ import annotations

import logging
import os
import sys
import threading
from collections import deque
from typing import List

_DEFAULT_LEVEL = os.getenv("GRIDROUTE_LOG_LEVEL", "INFO").upper()
_RESOLVED_LEVEL = logging.getLevelName(_DEFAULT_LEVEL)
if isinstance(_RESOLVED_LEVEL, str):
    _RESOLVED_LEVEL = logging.INFO

_BUFFER_SIZE = int(os.getenv("GRIDROUTE_LOG_BUFFER", "500"))
_LOG_FORMAT = "%(asctime)s | %(levelname)s | %(run_id)s | gridroute.%(module)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_buffer_lock = threading.Lock()
_log_buffer: deque[str] = deque(maxlen=_BUFFER_SIZE)
_run_id_lock = threading.Lock()
_CURRENT_RUN_ID = "-"


class RunIdFilter(logging.Filter):
    """Inject the run_id into each log record."""
    def filter(self, record):
        record.run_id = _CURRENT_RUN_ID
        return True


class _BufferingHandler(logging.Handler):
    """Capture log records into an in-memory ring buffer."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self._formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)

    def emit(self, record: logging.LogRecord) -> None:
        message = self._formatter.format(record)
        with _buffer_lock:
            _log_buffer.append(message)


_logging_configured = False


def _configure_logging() -> None:
    global _logging_configured
    if _logging_configured:
        return

    formatter = logging.Formatter(_LOG_FORMAT, _DATE_FORMAT)
    stream_handler = logging.StreamHandler(sys.__stderr__)
    stream_handler.setFormatter(formatter)
    stream_handler.setLevel(_RESOLVED_LEVEL)

    buffer_handler = _BufferingHandler()

    run_filter = RunIdFilter()

    root_logger = logging.getLogger()
    root_logger.setLevel(_RESOLVED_LEVEL)
    # 过滤器同时挂在 root 与 handler 上，保证每条记录都带 run_id
    if run_filter not in root_logger.filters:
        root_logger.addFilter(run_filter)
    stream_handler.addFilter(run_filter)
    buffer_handler.addFilter(run_filter)

    # Avoid attaching duplicate handlers if other configuration already exists.
    if not any(isinstance(handler, logging.StreamHandler) for handler in root_logger.handlers):
        root_logger.addHandler(stream_handler)

    if not any(isinstance(handler, _BufferingHandler) for handler in root_logger.handlers):
        root_logger.addHandler(buffer_handler)

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger configured with the unified gridroute format."""
    _configure_logging()
    return logging.getLogger(name)


def set_run_id(run_id: str) -> str:
    """Set the run id stamped on subsequent records; returns the previous one."""
    global _CURRENT_RUN_ID
    with _run_id_lock:
        previous = _CURRENT_RUN_ID
        _CURRENT_RUN_ID = run_id or "-"
    return previous


def set_level(level: str) -> None:
    """Change the root level (and our stream handler's) at runtime, e.g. from a CLI flag."""
    _configure_logging()
    resolved = logging.getLevelName(level.upper())
    if isinstance(resolved, str):
        raise ValueError(f"unknown log level: {level!r}")
    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)
    for handler in root_logger.handlers:
        if isinstance(handler, logging.StreamHandler) and getattr(handler, "stream", None) is sys.__stderr__:
            handler.setLevel(resolved)


def get_recent_output(limit: int = 200) -> List[str]:
    """Return the most recent log lines up to ``limit`` entries."""
    if limit <= 0:
        return []
    with _buffer_lock:
        return list(_log_buffer)[-limit:]


def export_recent_output(limit: int = 200) -> str:
    """Render recent log lines as a single newline-delimited string."""
    return "\n".join(get_recent_output(limit))


__all__ = [
    "get_logger",
    "set_run_id",
    "set_level",
    "get_recent_output",
    "export_recent_output",
]
