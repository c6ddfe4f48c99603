from storefront_client.core.domain.cart.cart_line import CartLine, LineKey
from storefront_client.core.domain.cart.cart_model import (
    compute_total,
    find_duplicate_keys,
    merge_line,
)
from storefront_client.core.domain.cart.cart_snapshot import CartSnapshot

__all__ = [
    "CartLine",
    "CartSnapshot",
    "LineKey",
    "compute_total",
    "find_duplicate_keys",
    "merge_line",
]
