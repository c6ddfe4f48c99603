from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TypeVar

import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from storefront_client.core.application.exceptions import ProviderError
from storefront_client.infrastructure.configuration import StorefrontSettings

logger = structlog.get_logger()

_T = TypeVar("_T")


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


def _log_retry(state: RetryCallState) -> None:
    exc = state.outcome.exception() if state.outcome else None
    logger.warning(
        "Retrying storefront read",
        processing_status="RETRYING",
        processing_retries=state.attempt_number,
        error_type=type(exc).__name__,
        error_details=str(exc),
        error_code=getattr(exc, "status_code", None),
        error_retryable=True,
    )


@dataclass(frozen=True)
class RetryPolicy:
    """Re-runs idempotent storefront reads (cart fetch, catalog) on transient failures.

    Only ``ProviderError`` with ``retryable=True`` is retried: transport errors
    and 5xx responses. 4xx and ``AuthError`` surface on the first attempt.
    Cart mutations are never wrapped, so an add is not sent twice.
    """

    max_attempts: int = 1
    initial_wait: float = 0.25
    max_wait: float = 5.0

    @classmethod
    def for_reads(cls, settings: StorefrontSettings) -> RetryPolicy:
        return cls(max_attempts=settings.fetch_max_attempts)

    async def run(self, fn: Callable[[], Awaitable[_T]]) -> _T:
        if self.max_attempts == 1:
            return await fn()
        retrying = AsyncRetrying(
            retry=retry_if_exception(_is_transient),
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_exponential_jitter(initial=self.initial_wait, max=self.max_wait),
            before_sleep=_log_retry,
            reraise=True,
        )
        return await retrying(fn)
