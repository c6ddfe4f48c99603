from __future__ import annotations

from dataclasses import dataclass

from storefront_client.core.application.exceptions.storefront_errors import StorefrontError

STOREFRONT_API = "storefront-api"


@dataclass(eq=False)
class ProviderError(StorefrontError):
    """Remote failure: the API answered non-2xx or could not be reached."""

    message: str
    provider: str = STOREFRONT_API
    retryable: bool = False
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message)

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"


class TransportError(ProviderError):
    """Network unreachable, connection reset or transport timeout."""


class CartOperationError(ProviderError):
    """Base for the per-operation cart failures."""

    @property
    def is_transport_failure(self) -> bool:
        return isinstance(self.__cause__, TransportError)


class CartFetchError(CartOperationError):
    pass


class CartAddError(CartOperationError):
    pass


class CartUpdateError(CartOperationError):
    pass


class CartRemoveError(CartOperationError):
    pass


class CartClearError(CartOperationError):
    pass


class ChatError(ProviderError):
    pass


class CatalogError(ProviderError):
    pass


class OrderError(ProviderError):
    pass
