"""Unit tests — HttpCatalogClient (respx-mocked storefront API)."""

from decimal import Decimal

import pytest
import respx
from httpx import Response

from storefront_client.core.application.exceptions import CatalogError
from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.tools.catalog.http_catalog_client import HttpCatalogClient
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)

API_URL = "https://shop.example.com/api"

PRODUCT = {
    "_id": "prod-a",
    "name": "Runner A",
    "brand": "Acme",
    "price": "59.90",
    "sizes": ["9", "10"],
    "colors": ["black"],
    "description": "Daily trainer",
}


def _build_client(settings: StorefrontSettings) -> HttpCatalogClient:
    return HttpCatalogClient(StorefrontHttpClient(settings))


class TestCatalog:
    @respx.mock
    @pytest.mark.parametrize("body", [[PRODUCT], {"products": [PRODUCT]}], ids=["list", "wrapped"])
    async def test_list_products_accepts_both_shapes(
        self, settings: StorefrontSettings, body: object
    ) -> None:
        respx.get(f"{API_URL}/products").mock(return_value=Response(200, json=body))

        products = await _build_client(settings).list_products()

        assert [p.product_id for p in products] == ["prod-a"]
        assert products[0].price == Decimal("59.90")
        assert products[0].description == "Daily trainer"

    @respx.mock
    async def test_get_product(self, settings: StorefrontSettings) -> None:
        respx.get(f"{API_URL}/products/prod-a").mock(return_value=Response(200, json=PRODUCT))

        product = await _build_client(settings).get_product("prod-a")

        assert product.name == "Runner A"

    @respx.mock
    async def test_search_sends_query(self, settings: StorefrontSettings) -> None:
        route = respx.get(f"{API_URL}/products/search").mock(
            return_value=Response(200, json=[PRODUCT])
        )

        products = await _build_client(settings).search_products("runner shoes")

        assert route.calls.last.request.url.params["q"] == "runner shoes"
        assert len(products) == 1

    @respx.mock
    async def test_not_found(self, settings: StorefrontSettings) -> None:
        respx.get(f"{API_URL}/products/missing").mock(return_value=Response(404))

        with pytest.raises(CatalogError) as exc_info:
            await _build_client(settings).get_product("missing")

        assert exc_info.value.status_code == 404
