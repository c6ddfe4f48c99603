from abc import ABC, abstractmethod

from storefront_client.core.domain.cart import CartSnapshot


class CartRepositoryPort(ABC):
    """Remote cart operations, one authenticated round trip each.

    Implementations MUST raise:
        - AuthError: on a missing token or a 401 from any operation.
        - The per-operation ``Cart*Error`` on any other failure.
    Mutations only acknowledge; callers re-fetch to see the result.
    """

    @abstractmethod
    async def fetch_cart(self) -> CartSnapshot:
        """Raises CartFetchError."""

    @abstractmethod
    async def add_item(self, product_id: str, size: str, color: str, quantity: int = 1) -> None:
        """Raises InvalidVariantError (nothing sent) or CartAddError."""

    @abstractmethod
    async def set_quantity(self, line_id: str, quantity: int) -> None:
        """Raises CartUpdateError."""

    @abstractmethod
    async def remove_item(self, line_id: str) -> None:
        """Raises CartRemoveError."""

    @abstractmethod
    async def clear_cart(self) -> None:
        """Raises CartClearError. One atomic request, never a partial clear."""
