"""Unit tests — trace_operation and storefront error recording on spans."""

from unittest.mock import MagicMock

import pytest
from opentelemetry.trace import StatusCode

from storefront_client.core.application.exceptions import AuthError, CartFetchError
from storefront_client.infrastructure.observability.tracing_setup import (
    record_storefront_error,
    trace_operation,
)


class TestRecordStorefrontError:
    def test_provider_errors_carry_status_and_retryability(self) -> None:
        span = MagicMock()

        record_storefront_error(span, CartFetchError(message="down", retryable=True, status_code=503))

        span.set_attribute.assert_any_call("storefront.error.type", "CartFetchError")
        span.set_attribute.assert_any_call("storefront.error.retryable", True)
        span.set_attribute.assert_any_call("http.status_code", 503)
        assert span.set_status.call_args.args[0].status_code is StatusCode.ERROR

    def test_auth_errors_only_record_the_type(self) -> None:
        span = MagicMock()

        record_storefront_error(span, AuthError("expired"))

        span.set_attribute.assert_called_once_with("storefront.error.type", "AuthError")


class TestTraceOperation:
    async def test_returns_the_wrapped_result(self) -> None:
        @trace_operation("unit.ok")
        async def compute(value: int) -> int:
            return value * 2

        assert await compute(21) == 42
        assert compute.__name__ == "compute"

    async def test_storefront_errors_propagate(self) -> None:
        @trace_operation("unit.fail")
        async def explode() -> None:
            raise AuthError("expired")

        with pytest.raises(AuthError):
            await explode()
