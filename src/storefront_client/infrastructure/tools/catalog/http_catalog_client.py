from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import quote

from storefront_client.core.application.exceptions import CatalogError, ProviderError
from storefront_client.core.application.ports import CatalogPort
from storefront_client.core.domain.catalog import Product
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_client.infrastructure.tools.common.dtos.product_payload_dto import ProductPayloadDTO
from storefront_client.infrastructure.tools.common.mappers.product_mapper import to_product
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)


class HttpCatalogClient(CatalogPort):
    def __init__(self, http: StorefrontHttpClient, retry_policy: RetryPolicy | None = None) -> None:
        self._http = http
        self._retry = retry_policy or RetryPolicy()

    async def list_products(self) -> list[Product]:
        payload = await self._read("list", lambda: self._http.get("products"))
        return self._to_products(payload)

    async def get_product(self, product_id: str) -> Product:
        path = f"products/{quote(product_id, safe='')}"
        payload = await self._read("get", lambda: self._http.get(path))
        if isinstance(payload, dict) and isinstance(payload.get("product"), dict):
            payload = payload["product"]
        return self._map(lambda: to_product(ProductPayloadDTO.model_validate(payload)))

    async def search_products(self, query: str) -> list[Product]:
        payload = await self._read(
            "search", lambda: self._http.get("products/search", params={"q": query})
        )
        return self._to_products(payload)

    # ── Helpers ──

    async def _read(self, action: str, fn: Callable[[], Awaitable[Any]]) -> Any:
        try:
            return await self._retry.run(fn)
        except ProviderError as exc:
            raise CatalogError(
                message=f"Catalog {action} failed: {exc.message}",
                retryable=exc.retryable,
                status_code=exc.status_code,
            ) from exc

    def _to_products(self, payload: Any) -> list[Product]:
        # Bare list or {products: [...]}
        if isinstance(payload, dict):
            payload = payload.get("products") or []
        items = payload or []
        return self._map(
            lambda: [to_product(ProductPayloadDTO.model_validate(item)) for item in items]
        )

    def _map(self, fn: Callable[[], Any]) -> Any:
        try:
            return fn()
        except ValueError as exc:
            raise CatalogError(message="Catalog payload is malformed") from exc
