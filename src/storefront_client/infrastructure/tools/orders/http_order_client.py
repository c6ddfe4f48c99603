import structlog

from storefront_client.core.application.exceptions import OrderError, ProviderError
from storefront_client.core.application.ports import OrderPort
from storefront_client.core.domain.checkout import OrderConfirmation, OrderRequest
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)
from storefront_client.infrastructure.tools.orders.mappers.order_payload_mapper import (
    order_id_from,
    to_order_payload,
)

logger = structlog.get_logger()


class HttpOrderClient(OrderPort):
    def __init__(self, http: StorefrontHttpClient) -> None:
        self._http = http

    async def place_order(self, request: OrderRequest) -> OrderConfirmation:
        try:
            payload = await self._http.post("orders", to_order_payload(request))
        except ProviderError as exc:
            raise OrderError(
                message=f"Order submission failed: {exc.message}",
                retryable=exc.retryable,
                status_code=exc.status_code,
            ) from exc
        order_id = order_id_from(payload)
        if order_id is None:
            logger.warning("Order accepted without an identifier", source_system="storefront-api")
        return OrderConfirmation(order_id=order_id, total=request.draft.total)
