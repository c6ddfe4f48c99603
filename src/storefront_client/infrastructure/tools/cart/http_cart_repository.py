from collections.abc import Awaitable, Callable
from typing import Any
from urllib.parse import quote

import structlog

from storefront_client.core.application.exceptions import (
    CartAddError,
    CartClearError,
    CartFetchError,
    CartOperationError,
    CartRemoveError,
    CartUpdateError,
    InvalidVariantError,
    ProviderError,
)
from storefront_client.core.application.ports import CartRepositoryPort
from storefront_client.core.domain.cart import CartSnapshot
from storefront_client.core.domain.catalog import check_completeness
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_client.infrastructure.tools.cart.mappers.cart_payload_mapper import to_snapshot
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)

logger = structlog.get_logger()


class HttpCartRepository(CartRepositoryPort):
    """Cart endpoints of the storefront API.

    Only ``fetch_cart`` goes through the retry policy; mutations are sent once.
    """

    def __init__(self, http: StorefrontHttpClient, retry_policy: RetryPolicy | None = None) -> None:
        self._http = http
        self._retry = retry_policy or RetryPolicy()

    async def fetch_cart(self) -> CartSnapshot:
        payload = await self._call(
            CartFetchError, "fetch", lambda: self._retry.run(lambda: self._http.get("cart"))
        )
        try:
            return to_snapshot(payload)
        except ValueError as exc:
            logger.error(
                "Cart payload could not be mapped",
                processing_status="ERROR",
                source_system="storefront-api",
                error_type=type(exc).__name__,
                error_details=str(exc)[:300],
            )
            raise CartFetchError(message="Cart payload is malformed") from exc

    async def add_item(self, product_id: str, size: str, color: str, quantity: int = 1) -> None:
        selection = check_completeness(size, color)
        if not selection.is_valid:
            raise InvalidVariantError(selection)
        body = {
            "productId": product_id,
            "size": selection.size,
            "color": selection.color,
            "quantity": quantity,
        }
        await self._call(CartAddError, "add", lambda: self._http.post("cart/add", body))

    async def set_quantity(self, line_id: str, quantity: int) -> None:
        body = {"itemId": line_id, "quantity": quantity}
        await self._call(CartUpdateError, "update", lambda: self._http.put("cart/update", body))

    async def remove_item(self, line_id: str) -> None:
        path = f"cart/remove/{quote(line_id, safe='')}"
        await self._call(CartRemoveError, "remove", lambda: self._http.delete(path))

    async def clear_cart(self) -> None:
        await self._call(CartClearError, "clear", lambda: self._http.delete("cart/clear"))

    async def _call(
        self,
        error_type: type[CartOperationError],
        action: str,
        fn: Callable[[], Awaitable[Any]],
    ) -> Any:
        try:
            return await fn()
        except ProviderError as exc:
            raise error_type(
                message=f"Cart {action} failed: {exc.message}",
                retryable=exc.retryable,
                status_code=exc.status_code,
            ) from exc
