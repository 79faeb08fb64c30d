"""Observability helpers for instrumenting provider calls."""

from __future__ import annotations

import logging
import time
from functools import wraps
from typing import Any, Awaitable, Callable, TypeVar

from morning_app.logging_config import ensure_correlation_id, get_logger, log_event, redact_for_log

LOGGER = get_logger(__name__)
R = TypeVar("R")


def _preview_kwargs(kwargs: dict, max_keys: int = 6) -> dict:
    preview: dict = {}
    for idx, (key, value) in enumerate(kwargs.items()):
        if idx >= max_keys:
            preview["truncated"] = True
            break
        preview[key] = value
    return redact_for_log(preview)


def instrument_call(call_name: str) -> Callable[[Callable[..., Awaitable[R]]], Callable[..., Awaitable[R]]]:
    """Wrap an async provider method to emit structured start/finish/failure logs."""

    def decorator(func: Callable[..., Awaitable[R]]) -> Callable[..., Awaitable[R]]:
        @wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> R:
            correlation_id = ensure_correlation_id()
            start = time.perf_counter()
            log_event(
                LOGGER,
                logging.INFO,
                "provider_call_started",
                call=call_name,
                correlation_id=correlation_id,
                kwargs=_preview_kwargs(kwargs),
            )
            try:
                result = await func(*args, **kwargs)
            except Exception as exc:
                duration_ms = round((time.perf_counter() - start) * 1000, 2)
                log_event(
                    LOGGER,
                    logging.ERROR,
                    "provider_call_failed",
                    call=call_name,
                    correlation_id=correlation_id,
                    duration_ms=duration_ms,
                    error=type(exc).__name__,
                )
                raise
            duration_ms = round((time.perf_counter() - start) * 1000, 2)
            log_event(
                LOGGER,
                logging.INFO,
                "provider_call_completed",
                call=call_name,
                correlation_id=correlation_id,
                duration_ms=duration_ms,
            )
            return result

        return wrapper

    return decorator


__all__ = ["instrument_call"]
