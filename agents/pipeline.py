"""Shared plumbing for suggestion pipelines: timeouts and the AI gate."""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

from models.suggestions import SuggestionContext
from tools.ai_enhancer import AIEnhancer
from tools.errors import ProviderTimeoutError

T = TypeVar("T")


async def with_timeout(awaitable: Awaitable[T], seconds: float, provider: str) -> T:
    """Await ``awaitable`` and turn an expired deadline into ``ProviderTimeoutError``."""

    try:
        return await asyncio.wait_for(awaitable, timeout=seconds)
    except asyncio.TimeoutError as exc:
        raise ProviderTimeoutError(provider, f"no answer within {seconds:g}s") from exc


def should_enhance(context: SuggestionContext, use_ai: bool, enhancer: Optional[AIEnhancer]) -> bool:
    return bool(use_ai and context.settings.ai_suggestions_enabled and enhancer is not None)


__all__ = ["should_enhance", "with_timeout"]
