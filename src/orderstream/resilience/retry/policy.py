"""Resilience – RetryPolicy for boolean publish operations.

The loop itself is ``tenacity.AsyncRetrying``: a falsy result counts as a
failed attempt, the wait comes from the :class:`BackoffProfile`, and
exhaustion yields ``False`` instead of raising.
"""
from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable

import tenacity

from orderstream.observability.logging import get_logger
from orderstream.resilience.retry.backoff import BackoffStrategy
from orderstream.resilience.retry.jitter import JitterStrategy
from orderstream.resilience.retry.profile import PRODUCTION_PROFILE, BackoffProfile

logger = get_logger(__name__)

type PublishOperation = Callable[[], Awaitable[bool]]
type Sleep = Callable[[float], Awaitable[Any]]


class RetryPolicy:
    """Re-run a boolean async operation with exponential backoff and jitter.

    Parameters
    ----------
    profile:
        Backoff parameters; defaults to :data:`PRODUCTION_PROFILE`.
    jitter:
        Override the profile's jitter (``NoJitter()`` gives exact delays).
    sleep:
        Awaitable sleep used between attempts; defaults to
        :func:`asyncio.sleep`.  Cancelling the caller while it waits here
        ends the retry loop.
    """

    def __init__(
        self,
        profile: BackoffProfile = PRODUCTION_PROFILE,
        *,
        jitter: JitterStrategy | None = None,
        sleep: Sleep | None = None,
    ) -> None:
        self.profile = profile
        self._backoff: BackoffStrategy = profile.backoff()
        self._jitter: JitterStrategy = jitter or profile.jitter()
        self._sleep: Sleep = sleep or asyncio.sleep

    def compute_delay(self, attempt: int) -> float:
        return self._jitter.apply(self._backoff.compute(attempt))

    def _wait(self, retry_state: tenacity.RetryCallState) -> float:
        return self.compute_delay(retry_state.attempt_number)

    def _build_retrying(self, total_attempts: int, operation_id: str) -> tenacity.AsyncRetrying:
        def _before_sleep(retry_state: tenacity.RetryCallState) -> None:
            logger.warning(
                "retry.attempt_failed",
                operation_id=operation_id,
                attempt=retry_state.attempt_number,
                max_attempts=total_attempts,
                delay=round(retry_state.next_action.sleep, 3) if retry_state.next_action else None,
            )

        def _exhausted(retry_state: tenacity.RetryCallState) -> bool:
            logger.error(
                "retry.exhausted",
                operation_id=operation_id,
                attempts=retry_state.attempt_number,
            )
            return False

        return tenacity.AsyncRetrying(
            stop=tenacity.stop_after_attempt(total_attempts),
            wait=self._wait,
            retry=tenacity.retry_if_result(lambda ok: not ok),
            before_sleep=_before_sleep,
            retry_error_callback=_exhausted,
            sleep=self._sleep,
        )

    async def retry_publish(
        self,
        operation: PublishOperation,
        max_attempts: int,
        operation_id: str,
    ) -> bool:
        """Run *operation* up to ``max_attempts + 1`` times.

        Returns ``True`` on the first success and ``False`` once every
        attempt has failed or the wait between attempts was cancelled.
        Exceptions from *operation* count as failed attempts and are logged,
        never raised.  A negative *max_attempts* is treated as ``0``.
        """
        total_attempts = max(max_attempts, 0) + 1
        attempts = 0

        async def _attempt() -> bool:
            nonlocal attempts
            attempts += 1
            try:
                return bool(await operation())
            except asyncio.CancelledError:
                raise
            except Exception as exc:
                logger.warning(
                    "retry.attempt_error",
                    operation_id=operation_id,
                    attempt=attempts,
                    error=repr(exc),
                )
                return False

        try:
            ok = await self._build_retrying(total_attempts, operation_id)(_attempt)
        except asyncio.CancelledError:
            logger.warning("retry.cancelled", operation_id=operation_id, attempts=attempts)
            return False

        if ok:
            logger.info("retry.succeeded", operation_id=operation_id, attempts=attempts)
        return bool(ok)


__all__ = ["PublishOperation", "RetryPolicy", "Sleep"]
