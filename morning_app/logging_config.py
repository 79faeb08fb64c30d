"""Structured logging helpers for the Morning Helper app."""

from __future__ import annotations

import contextlib
import contextvars
import json
import logging
import os
import re
import uuid
from typing import Any, Dict, Iterator

CORRELATION_ID: contextvars.ContextVar[str | None] = contextvars.ContextVar("correlation_id", default=None)

# Attributes every LogRecord carries; anything else arrived through ``extra``.
_RECORD_ATTRIBUTES = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "taskName"}

# Coordinates, credentials and article text never reach the log stream.
_SENSITIVE_KEYS = frozenset(
    {"user_id", "latitude", "longitude", "api_key", "appid", "apiKey", "url", "description", "title"}
)
_EMAIL = re.compile(r"[\w.\-]+@[\w.\-]+")
_REDACTED = "[redacted]"


class JsonFormatter(logging.Formatter):
    """One JSON object per record: level, logger, event, correlation id, extras."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        message = super().format(record)
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": message,
            "event": getattr(record, "event", message),
            "correlation_id": getattr(record, "correlation_id", None) or CORRELATION_ID.get(),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRIBUTES and key not in payload
        }
        payload.update(redact_for_log(extras))
        return json.dumps(payload)


def configure_logging(level: int | str | None = None) -> None:
    """Route the root logger through a single JSON stream handler."""

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logging.basicConfig(level=level or os.getenv("LOG_LEVEL", "INFO"), handlers=[handler], force=True)


def get_logger(name: str) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name)


def redact_for_log(payload: Any) -> Any:
    """Recursively mask sensitive keys, e-mail addresses and URLs."""

    if payload is None or isinstance(payload, (bool, int, float)):
        return payload
    if isinstance(payload, str):
        if _EMAIL.search(payload):
            return _EMAIL.sub("[redacted-email]", payload)
        return "[redacted-url]" if payload.lower().startswith("http") else payload
    if isinstance(payload, (list, tuple)):
        return [redact_for_log(item) for item in payload]
    if isinstance(payload, dict):
        return {
            key: _REDACTED if key in _SENSITIVE_KEYS else redact_for_log(value)
            for key, value in payload.items()
        }
    return str(payload)


def ensure_correlation_id(correlation_id: str | None = None) -> str:
    """Adopt ``correlation_id``, keep the current one, or mint a new one."""

    if correlation_id:
        CORRELATION_ID.set(correlation_id)
        return correlation_id
    current = CORRELATION_ID.get()
    if current:
        return current
    minted = uuid.uuid4().hex
    CORRELATION_ID.set(minted)
    return minted


@contextlib.contextmanager
def correlation_context(correlation_id: str | None = None) -> Iterator[str]:
    token = CORRELATION_ID.set(correlation_id or CORRELATION_ID.get() or uuid.uuid4().hex)
    try:
        yield CORRELATION_ID.get()
    finally:
        CORRELATION_ID.reset(token)


def log_event(logger: logging.Logger, level: int, event: str, **fields: Any) -> None:
    """Log ``event`` with redacted structured fields and the active correlation id."""

    correlation_id = ensure_correlation_id(fields.pop("correlation_id", None))
    exc_info = fields.pop("exc_info", None)
    logger.log(
        level,
        event,
        exc_info=exc_info,
        extra={"event": event, "correlation_id": correlation_id, **redact_for_log(fields)},
    )


@contextlib.contextmanager
def operation_context(name: str, correlation_id: str | None = None) -> Iterator[str]:
    """Scope a correlation id around a named app or orchestration call."""

    with correlation_context(correlation_id) as scoped_id:
        log_event(logging.getLogger(__name__), logging.DEBUG, "operation_started", operation=name)
        yield scoped_id


__all__ = [
    "JsonFormatter",
    "configure_logging",
    "correlation_context",
    "ensure_correlation_id",
    "get_logger",
    "log_event",
    "operation_context",
    "redact_for_log",
]
