from dataclasses import dataclass

from storefront_client.core.application.exceptions import StorefrontError
from storefront_client.core.domain.cart import CartSnapshot


@dataclass(frozen=True)
class CartOk:
    """The operation succeeded; ``snapshot`` is the one now published.

    ``stale`` is set when a mutation was acknowledged but the refresh that
    should have followed it failed.
    """

    snapshot: CartSnapshot
    stale: bool = False

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class CartErr:
    """The operation failed; ``snapshot`` is the prior one, still displayed."""

    error: StorefrontError
    snapshot: CartSnapshot

    @property
    def ok(self) -> bool:
        return False


CartOperationResult = CartOk | CartErr
