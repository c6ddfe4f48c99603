"""Unit tests — HttpOrderClient (respx-mocked storefront API)."""

import json
from decimal import Decimal

import pytest
import respx
from httpx import Response

from storefront_client.core.application.exceptions import OrderError
from storefront_client.core.domain.checkout import (
    OrderDraft,
    OrderLine,
    OrderRequest,
    ShippingAddress,
)
from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)
from storefront_client.infrastructure.tools.orders.http_order_client import HttpOrderClient

API_URL = "https://shop.example.com/api"


def _build_request() -> OrderRequest:
    draft = OrderDraft(
        lines=(OrderLine("prod-a", 2, "10", "black", Decimal("50")),),
        subtotal=Decimal("100"),
        shipping=Decimal("10"),
    )
    address = ShippingAddress("1 Main St", "Springfield", "CA", "90001", "US")
    return OrderRequest(draft, address, payment_method="card")


class TestPlaceOrder:
    @respx.mock
    async def test_posts_order_payload(self, settings: StorefrontSettings) -> None:
        route = respx.post(f"{API_URL}/orders").mock(
            return_value=Response(201, json={"_id": "order-9"})
        )

        confirmation = await HttpOrderClient(StorefrontHttpClient(settings)).place_order(
            _build_request()
        )

        body = json.loads(route.calls.last.request.content)
        assert body["items"] == [
            {"product": "prod-a", "quantity": 2, "size": "10", "color": "black", "price": 50.0}
        ]
        assert body["shippingAddress"]["zipCode"] == "90001"
        assert body["paymentMethod"] == "card"
        assert body["totalAmount"] == 110.0
        assert confirmation.order_id == "order-9"
        assert confirmation.total == Decimal("110")

    @respx.mock
    async def test_nested_order_id(self, settings: StorefrontSettings) -> None:
        respx.post(f"{API_URL}/orders").mock(
            return_value=Response(201, json={"order": {"_id": "order-10"}})
        )

        confirmation = await HttpOrderClient(StorefrontHttpClient(settings)).place_order(
            _build_request()
        )

        assert confirmation.order_id == "order-10"

    @respx.mock
    async def test_rejected_order(self, settings: StorefrontSettings) -> None:
        respx.post(f"{API_URL}/orders").mock(return_value=Response(400))

        with pytest.raises(OrderError) as exc_info:
            await HttpOrderClient(StorefrontHttpClient(settings)).place_order(_build_request())

        assert exc_info.value.status_code == 400
