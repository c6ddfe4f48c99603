"""Maps the raw ``GET /cart`` body into a ``CartSnapshot``.

The reported total is carried over as-is; reconciling it against the lines
is the coordinator's job, not the mapper's.
"""

from typing import Any

from storefront_client.core.domain.cart import CartLine, CartSnapshot
from storefront_client.infrastructure.tools.cart.dtos.cart_payload_dto import (
    CartLinePayloadDTO,
    CartPayloadDTO,
)
from storefront_client.infrastructure.tools.common.mappers.product_mapper import to_product


def to_snapshot(payload: Any) -> CartSnapshot:
    """Raises ValueError (pydantic's ValidationError included) on a malformed body."""
    if payload is None:
        return CartSnapshot.empty()
    dto = CartPayloadDTO.model_validate(payload)
    return CartSnapshot(lines=tuple(_to_line(item) for item in dto.items), total=dto.total)


def _to_line(item: CartLinePayloadDTO) -> CartLine:
    return CartLine(
        line_id=item.line_id,
        product=to_product(item.product),
        size=item.size,
        color=item.color,
        quantity=item.quantity,
    )
