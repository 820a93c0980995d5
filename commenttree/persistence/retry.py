"""Retry with exponential backoff for transient storage failures."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError
from tenacity import (
    AsyncRetrying,
    RetryError,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from commenttree.config import RetrySettings
from commenttree.domain.error import TransientStorageError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Connection drops, server restarts, pool exhaustion and statement timeouts.
# Integrity and programming errors are not transient and propagate at once.
TRANSIENT_ERRORS: tuple[type[BaseException], ...] = (
    OperationalError,
    InterfaceError,
    PoolTimeoutError,
    asyncio.TimeoutError,
)


def storage_retrying(policy: RetrySettings) -> AsyncRetrying:
    """Build a tenacity controller for one storage operation.

    Args:
        policy: Attempt count and backoff configuration

    Returns:
        AsyncRetrying that retries only transient errors
    """
    return AsyncRetrying(
        stop=stop_after_attempt(policy.attempts),
        wait=wait_exponential(
            multiplier=policy.initial_delay,
            exp_base=policy.backoff,
            max=policy.max_delay,
        ),
        retry=retry_if_exception_type(TRANSIENT_ERRORS),
        before_sleep=before_sleep_log(logger, logging.WARNING),
        reraise=False,
    )


async def run_with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetrySettings,
    name: str,
    on_failure: Callable[[], Awaitable[None]] | None = None,
) -> T:
    """Run operation, retrying transient failures.

    Only idempotent operations may be passed here.

    Args:
        operation: Zero-argument coroutine factory, called once per attempt
        policy: Retry configuration
        name: Operation name used in errors and logs
        on_failure: Cleanup awaited after every transient failure, e.g. a
            session rollback so the next attempt starts a fresh transaction

    Returns:
        Result of the first successful attempt

    Raises:
        TransientStorageError: If every attempt failed with a transient error
    """

    async def _attempt() -> T:
        try:
            return await operation()
        except TRANSIENT_ERRORS:
            if on_failure is not None:
                await on_failure()
            raise

    try:
        return await storage_retrying(policy)(_attempt)
    except RetryError as e:
        last = e.last_attempt.exception()
        logger.error(
            "Storage operation %s failed after %d attempts: %s",
            name,
            policy.attempts,
            last,
        )
        raise TransientStorageError(name, policy.attempts) from last
