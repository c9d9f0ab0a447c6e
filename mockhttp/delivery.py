from __future__ import annotations

import asyncio
from typing import Callable, TypeVar

R = TypeVar("R")


def deliver(delay_ms: float, result: R, callback: Callable[[R], None]) -> "asyncio.Task[None]":
    """
    Schedule ``callback(result)`` on the running loop after ``delay_ms`` milliseconds.

    The callback fires exactly once. Nothing in this package cancels the
    returned task; callers may, through the usual ``Task.cancel()``.
    """
    if delay_ms < 0:
        raise ValueError(f"delay must be non-negative, got {delay_ms}")

    async def _later() -> None:
        await asyncio.sleep(delay_ms / 1000.0)
        callback(result)

    return asyncio.get_running_loop().create_task(_later())
