"""
Retry decorator for collaborator transport calls.

Wraps an async callable and retries it on transient CollaboratorError
failures (timeouts, transport errors, 429 and 5xx) with exponential
backoff. Validation and parse errors are never retried.
"""

import asyncio
import functools
from typing import Any, Awaitable, Callable, TypeVar

from .exceptions import CollaboratorError
from .logging import get_logger

logger = get_logger(__name__, component="retry")

T = TypeVar("T")


def with_retry(
    max_attempts: int = 3,
    base_delay: float = 1.0,
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Retry an async transport call on retryable CollaboratorError.

    Args:
        max_attempts: Total number of attempts (1 disables retrying)
        base_delay: Delay before the second attempt; doubled on each retry

    Example:
        @with_retry(max_attempts=3, base_delay=1.0)
        async def _request(self, method, url, **kwargs): ...
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            attempt = 0
            while True:
                try:
                    return await func(*args, **kwargs)
                except CollaboratorError as exc:
                    attempt += 1
                    if not exc.is_retryable or attempt >= max_attempts:
                        raise
                    delay = base_delay * (2 ** (attempt - 1))
                    logger.warning(
                        f"Retrying {func.__qualname__} after transient failure",
                        extra={
                            "service": exc.service,
                            "attempt": attempt,
                            "max_attempts": max_attempts,
                            "delay_seconds": delay,
                            "status_code": exc.status_code,
                            "error": str(exc),
                        },
                    )
                    await asyncio.sleep(delay)
        return wrapper
    return decorator
