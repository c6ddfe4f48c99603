"""Unit tests — InMemoryCartRepository behaves like the storefront API."""

import pytest

from storefront_client.core.application.exceptions import (
    CartAddError,
    CartUpdateError,
    InvalidVariantError,
)
from storefront_client.core.domain.cart import CartLine
from storefront_client.core.domain.catalog import Product
from storefront_client.infrastructure.fakes.in_memory_cart_repository import (
    InMemoryCartRepository,
)


@pytest.fixture()
def repository(product_a: Product, line_a: CartLine) -> InMemoryCartRepository:
    return InMemoryCartRepository(products=[product_a], lines=[line_a])


class TestInMemoryCartRepository:
    async def test_adding_existing_variant_increments(
        self, repository: InMemoryCartRepository
    ) -> None:
        await repository.add_item("prod-a", "10", "black", 3)

        snapshot = await repository.fetch_cart()
        assert len(snapshot.lines) == 1
        assert snapshot.lines[0].quantity == 5

    async def test_unknown_product_is_rejected(self, repository: InMemoryCartRepository) -> None:
        with pytest.raises(CartAddError):
            await repository.add_item("nope", "10", "black")

    async def test_incomplete_variant_is_not_counted(
        self, repository: InMemoryCartRepository
    ) -> None:
        with pytest.raises(InvalidVariantError):
            await repository.add_item("prod-a", "", "black")

        assert repository.network_calls == 0

    async def test_unknown_line_update(self, repository: InMemoryCartRepository) -> None:
        with pytest.raises(CartUpdateError):
            await repository.set_quantity("missing", 2)

    async def test_queued_failure_fires_once(self, repository: InMemoryCartRepository) -> None:
        repository.fail_next("clear_cart", CartUpdateError(message="x"))

        with pytest.raises(CartUpdateError):
            await repository.clear_cart()
        await repository.clear_cart()

        assert (await repository.fetch_cart()).is_empty
        assert repository.calls["clear_cart"] == 2
