"""OpenTelemetry tracing for the storefront client.

Spans are always created through the global tracer; without
``configure_tracing`` they go to the no-op provider. Enabling
STOREFRONT_TRACING_ENABLED installs an SDK provider exporting to the console.
"""

from __future__ import annotations

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.trace import Status, StatusCode

from storefront_client.core.application.exceptions import ProviderError, StorefrontError
from storefront_client.infrastructure.configuration import StorefrontSettings

TRACER_NAME = "storefront-client"

_CONFIGURED = False

P = ParamSpec("P")
R = TypeVar("R")


def configure_tracing(settings: StorefrontSettings) -> bool:
    """Install the SDK provider once if tracing is enabled. Returns whether it is active."""
    global _CONFIGURED  # noqa: PLW0603
    if _CONFIGURED or not settings.tracing_enabled:
        return _CONFIGURED
    _CONFIGURED = True

    resource = Resource.create(
        {"service.name": settings.service_name, "deployment.environment": settings.app_env}
    )
    provider = TracerProvider(resource=resource)
    provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))
    trace.set_tracer_provider(provider)
    return True


def get_tracer() -> trace.Tracer:
    return trace.get_tracer(TRACER_NAME)


def record_storefront_error(span: trace.Span, exc: StorefrontError) -> None:
    """Mark ``span`` failed with the storefront error's type and HTTP status."""
    span.set_attribute("storefront.error.type", type(exc).__name__)
    if isinstance(exc, ProviderError):
        span.set_attribute("storefront.error.retryable", exc.retryable)
        if exc.status_code is not None:
            span.set_attribute("http.status_code", exc.status_code)
    span.set_status(Status(StatusCode.ERROR, str(exc)))


def trace_operation(
    span_name: str,
) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Wrap a coroutine function in a span; storefront errors mark it failed.

    Usage:
        @trace_operation("workflow.checkout")
        async def place_order(self, address): ...
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with get_tracer().start_as_current_span(span_name) as span:
                try:
                    return await func(*args, **kwargs)
                except StorefrontError as exc:
                    record_storefront_error(span, exc)
                    raise

        return wrapper

    return decorator
