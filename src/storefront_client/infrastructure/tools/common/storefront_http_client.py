"""Authenticated JSON transport shared by every storefront adapter.

Translates httpx outcomes into the storefront error hierarchy so adapters
only deal with parsed payloads or typed failures:
    401          -> AuthError
    other non-2xx -> ProviderError(status_code=...)
    network       -> TransportError
"""

import time
from typing import Any, NoReturn

import httpx
import structlog

from storefront_client.core.application.exceptions import (
    AuthError,
    ProviderError,
    StorefrontError,
    TransportError,
)
from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.observability import redact_text
from storefront_client.infrastructure.observability.metrics_service import (
    HTTP_LATENCY_SECONDS,
    HTTP_REQUESTS_TOTAL,
)
from storefront_client.infrastructure.observability.tracing_setup import (
    get_tracer,
    record_storefront_error,
)

logger = structlog.get_logger()

_PROVIDER = "storefront-api"


class StorefrontHttpClient:
    def __init__(self, settings: StorefrontSettings, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings
        self.base_url = settings.api_url.rstrip("/")
        self._client = client
        self._owns_client = client is None

    def _get_headers(self) -> dict[str, str]:
        token = self.settings.api_token.get_secret_value() if self.settings.api_token else ""
        if not token.strip():
            raise AuthError("No bearer token available for the storefront session.")
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"Bearer {token}",
        }

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.settings.http_timeout_seconds)
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    # ── Verbs ──

    async def get(self, path: str, params: dict[str, str] | None = None) -> Any:
        return await self.request("GET", path, params=params)

    async def post(self, path: str, json_data: dict[str, Any]) -> Any:
        return await self.request("POST", path, json_data=json_data)

    async def put(self, path: str, json_data: dict[str, Any]) -> Any:
        return await self.request("PUT", path, json_data=json_data)

    async def delete(self, path: str) -> Any:
        return await self.request("DELETE", path)

    async def request(
        self,
        method: str,
        path: str,
        *,
        json_data: dict[str, Any] | None = None,
        params: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self.base_url}/{path.lstrip('/')}"
        headers = self._get_headers()
        with get_tracer().start_as_current_span("storefront.http") as span:
            span.set_attribute("http.method", method)
            span.set_attribute("http.route", path)
            start = time.perf_counter()
            try:
                response = await self._get_client().request(
                    method, url, headers=headers, json=json_data, params=params
                )
            except httpx.TransportError as exc:
                span.set_attribute("storefront.error.type", "TransportError")
                self._raise_transport_error(method, path, exc)
            finally:
                HTTP_LATENCY_SECONDS.labels(method=method).observe(time.perf_counter() - start)
            span.set_attribute("http.status_code", response.status_code)
            try:
                return self._handle_response(method, path, response)
            except StorefrontError as exc:
                record_storefront_error(span, exc)
                raise

    # ── Response translation ──

    def _handle_response(self, method: str, path: str, response: httpx.Response) -> Any:
        if response.status_code == httpx.codes.UNAUTHORIZED:
            HTTP_REQUESTS_TOTAL.labels(method=method, outcome="unauthorized").inc()
            logger.warning(
                "Storefront API rejected the bearer token",
                source_system=_PROVIDER,
                context_method=method,
                context_endpoint=path,
                error_type="AuthError",
                error_code=response.status_code,
            )
            raise AuthError("Session is no longer authorised.", context={"path": path})

        if not response.is_success:
            HTTP_REQUESTS_TOTAL.labels(method=method, outcome="error").inc()
            detail = redact_text(response.text[:300])
            logger.error(
                "Storefront API returned an error",
                processing_status="ERROR",
                source_system=_PROVIDER,
                context_method=method,
                context_endpoint=path,
                error_type="HttpStatusError",
                error_code=response.status_code,
                error_details=detail,
                error_retryable=response.is_server_error,
            )
            raise ProviderError(
                message=f"{method} {path} returned {response.status_code}",
                retryable=response.is_server_error,
                status_code=response.status_code,
            )

        HTTP_REQUESTS_TOTAL.labels(method=method, outcome="success").inc()
        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            # Acknowledgements may come back as plain text
            return None

    def _raise_transport_error(self, method: str, path: str, exc: httpx.TransportError) -> NoReturn:
        HTTP_REQUESTS_TOTAL.labels(method=method, outcome="transport_error").inc()
        logger.error(
            "Storefront API unreachable",
            processing_status="ERROR",
            source_system=_PROVIDER,
            context_method=method,
            context_endpoint=path,
            error_type=type(exc).__name__,
            error_details=redact_text(str(exc)),
            error_retryable=True,
        )
        raise TransportError(message=f"{method} {path} failed: {exc}", retryable=True) from exc
