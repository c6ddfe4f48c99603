from abc import ABC, abstractmethod

from storefront_client.core.domain.checkout import OrderConfirmation, OrderRequest


class OrderPort(ABC):
    @abstractmethod
    async def place_order(self, request: OrderRequest) -> OrderConfirmation:
        """Submit the order. Raises OrderError or AuthError."""
