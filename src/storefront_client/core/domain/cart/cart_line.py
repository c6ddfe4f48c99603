from dataclasses import dataclass
from decimal import Decimal

from storefront_client.core.domain.catalog.product import Product


@dataclass(frozen=True)
class LineKey:
    """Identity of a cart entry: one line per (product, size, color)."""

    product_id: str
    size: str
    color: str

    def __str__(self) -> str:
        return f"{self.product_id}/{self.size}/{self.color}"


@dataclass(frozen=True)
class CartLine:
    line_id: str
    product: Product
    size: str
    color: str
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(f"Cart line '{self.line_id}' must hold at least one unit.")

    @property
    def key(self) -> LineKey:
        return LineKey(self.product.product_id, self.size, self.color)

    @property
    def subtotal(self) -> Decimal:
        return self.product.price * self.quantity
