from decimal import Decimal

import pytest

from storefront_client.core.domain.cart import CartLine
from storefront_client.core.domain.catalog import Product
from storefront_client.infrastructure.configuration import StorefrontSettings

API_URL = "https://shop.example.com/api"


@pytest.fixture
def settings() -> StorefrontSettings:
    return StorefrontSettings(
        STOREFRONT_API_URL=API_URL,
        STOREFRONT_API_TOKEN="mock_storefront_token",
        STOREFRONT_HTTP_TIMEOUT_SECONDS=2.0,
        STOREFRONT_FETCH_MAX_ATTEMPTS=1,
    )


@pytest.fixture
def product_a() -> Product:
    return Product(
        product_id="prod-a",
        name="Runner A",
        price=Decimal("50"),
        brand="Acme",
        sizes=("9", "10"),
        colors=("black", "white"),
    )


@pytest.fixture
def product_b() -> Product:
    return Product(
        product_id="prod-b",
        name="Trail B",
        price=Decimal("80"),
        brand="Acme",
        sizes=("9", "10"),
        colors=("red", "blue"),
    )


@pytest.fixture
def line_a(product_a: Product) -> CartLine:
    return CartLine(line_id="line-a", product=product_a, size="10", color="black", quantity=2)
