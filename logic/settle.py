"""Run independent coroutines together and collect each outcome separately."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Awaitable, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Settled(Generic[T]):
    """Outcome of one operation: either ``value`` or ``error`` is meaningful."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def value_or(self, default: Callable[[], T]) -> T:
        """Return the value, or build the substitute when the operation failed."""

        if self.error is not None:
            return default()
        return self.value  # type: ignore[return-value]


async def _settle(awaitable: Awaitable[T]) -> Settled[T]:
    try:
        return Settled(value=await awaitable)
    except Exception as exc:  # noqa: BLE001 - failures are reported through Settled
        return Settled(error=exc)


async def settle_all(*awaitables: Awaitable[T]) -> List[Settled[T]]:
    """Await every operation concurrently; one failure never cancels the others.

    Results keep the order of ``awaitables``. Cancellation of the caller still
    propagates to every pending operation.
    """

    return list(await asyncio.gather(*(_settle(awaitable) for awaitable in awaitables)))


__all__ = ["Settled", "settle_all"]
