from dataclasses import dataclass
from enum import StrEnum

from storefront_client.core.domain.catalog.product import Product


class CartIntent(StrEnum):
    """Intent tags the assistant attaches when a turn concerns the cart."""

    ADD_TO_CART = "add_to_cart"
    REMOVE_FROM_CART = "remove_from_cart"


def is_cart_affecting(intent: str | None) -> bool:
    return intent in {CartIntent.ADD_TO_CART.value, CartIntent.REMOVE_FROM_CART.value}


@dataclass(frozen=True)
class AssistantReply:
    """Upstream reply contract: ``{response, products?, intent?}``."""

    text: str
    products: tuple[Product, ...] = ()
    intent: str | None = None

    @property
    def affects_cart(self) -> bool:
        return is_cart_affecting(self.intent)


@dataclass(frozen=True)
class VariantRequest:
    """Product and options the user picked alongside a chat turn."""

    product: Product
    size: str
    color: str
    quantity: int = 1
