"""Asynchronous helpers shared by providers."""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

__all__ = ["retry", "run_blocking"]


async def run_blocking(func: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Run a blocking call on the loop's default executor and await it."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, functools.partial(func, *args, **kwargs))


async def retry(
    task: Callable[[], Awaitable[T]],
    delay: float,
    attempts: int,
) -> T:
    """Run a task until it succeeds or the attempts are used up.

    Args:
        task: Factory returning a fresh awaitable per attempt.
        delay: Seconds to wait between attempts.
        attempts: Maximum number of attempts, at least 1.

    Returns:
        Result of the first successful attempt.

    Raises:
        ValueError: If attempts is less than 1.
        Exception: The error of the last attempt, unchanged.
    """
    if attempts < 1:
        raise ValueError("attempts must be at least 1")

    for attempt in range(1, attempts):
        try:
            return await task()
        except Exception as e:
            logger.debug("Attempt %d/%d failed: %s", attempt, attempts, e)
            await asyncio.sleep(delay)

    return await task()
