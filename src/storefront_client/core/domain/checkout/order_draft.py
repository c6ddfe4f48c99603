from dataclasses import dataclass
from decimal import Decimal

from storefront_client.core.domain.cart.cart_snapshot import CartSnapshot
from storefront_client.core.domain.checkout.shipping_address import ShippingAddress


@dataclass(frozen=True)
class ShippingPolicy:
    """Flat shipping fee, waived once the subtotal goes past the threshold."""

    free_threshold: Decimal = Decimal("100")
    flat_cost: Decimal = Decimal("10")

    def cost_for(self, subtotal: Decimal) -> Decimal:
        return Decimal("0") if subtotal > self.free_threshold else self.flat_cost


@dataclass(frozen=True)
class OrderLine:
    product_id: str
    quantity: int
    size: str
    color: str
    price: Decimal


@dataclass(frozen=True)
class OrderDraft:
    lines: tuple[OrderLine, ...]
    subtotal: Decimal
    shipping: Decimal

    @classmethod
    def from_snapshot(cls, snapshot: CartSnapshot, policy: ShippingPolicy) -> "OrderDraft":
        lines = tuple(
            OrderLine(
                product_id=line.product.product_id,
                quantity=line.quantity,
                size=line.size,
                color=line.color,
                price=line.product.price,
            )
            for line in snapshot.lines
        )
        return cls(lines=lines, subtotal=snapshot.total, shipping=policy.cost_for(snapshot.total))

    @property
    def total(self) -> Decimal:
        return self.subtotal + self.shipping


@dataclass(frozen=True)
class OrderRequest:
    draft: OrderDraft
    address: ShippingAddress
    payment_method: str = "card"


@dataclass(frozen=True)
class OrderConfirmation:
    order_id: str | None
    total: Decimal
