from storefront_client.core.domain.checkout.order_draft import (
    OrderConfirmation,
    OrderDraft,
    OrderLine,
    OrderRequest,
    ShippingPolicy,
)
from storefront_client.core.domain.checkout.shipping_address import ShippingAddress

__all__ = [
    "OrderConfirmation",
    "OrderDraft",
    "OrderLine",
    "OrderRequest",
    "ShippingAddress",
    "ShippingPolicy",
]
