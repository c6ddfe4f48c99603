"""Unit tests — RetryPolicy."""

from unittest.mock import AsyncMock

import pytest

from storefront_client.core.application.exceptions import ProviderError
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy


class TestRetryPolicy:
    async def test_default_fails_fast(self) -> None:
        fn = AsyncMock(side_effect=ProviderError(message="down", retryable=True))

        with pytest.raises(ProviderError):
            await RetryPolicy().run(fn)

        assert fn.await_count == 1

    async def test_retries_retryable_errors(self) -> None:
        fn = AsyncMock(side_effect=[ProviderError(message="blip", retryable=True), "ok"])

        result = await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(fn)

        assert result == "ok"
        assert fn.await_count == 2

    async def test_does_not_retry_permanent_errors(self) -> None:
        fn = AsyncMock(side_effect=ProviderError(message="bad request", status_code=400))

        with pytest.raises(ProviderError):
            await RetryPolicy(max_attempts=3, initial_wait=0, max_wait=0).run(fn)

        assert fn.await_count == 1

    async def test_gives_up_after_max_attempts(self) -> None:
        fn = AsyncMock(side_effect=ProviderError(message="down", retryable=True))

        with pytest.raises(ProviderError):
            await RetryPolicy(max_attempts=2, initial_wait=0, max_wait=0).run(fn)

        assert fn.await_count == 2

    def test_for_reads_follows_settings(self, settings) -> None:
        custom = settings.model_copy(update={"fetch_max_attempts": 4})

        assert RetryPolicy.for_reads(custom).max_attempts == 4
