"""Resilience patterns: timeouts around pool lifecycle calls."""

import asyncio
import functools
import logging
from typing import Callable, Any, TypeVar

logger = logging.getLogger("resilience")

T = TypeVar('T')


def with_timeout(seconds: float) -> Callable:
    """Decorator to add a timeout to an async function.

    Args:
        seconds: Timeout in seconds.

    Returns:
        Decorated function that raises TimeoutError once the timeout expires.
    """
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @functools.wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await asyncio.wait_for(
                    func(*args, **kwargs),
                    timeout=seconds
                )
            except asyncio.TimeoutError:
                logger.warning("%s timed out after %.2fs", getattr(func, "__name__", func), seconds)
                raise TimeoutError(f"Function timed out after {seconds}s")

        return async_wrapper

    return decorator
