from typing import Any

from storefront_client.core.domain.checkout import OrderRequest


def to_order_payload(request: OrderRequest) -> dict[str, Any]:
    """``POST /orders`` body. Money goes out as JSON numbers."""
    return {
        "items": [
            {
                "product": line.product_id,
                "quantity": line.quantity,
                "size": line.size,
                "color": line.color,
                "price": float(line.price),
            }
            for line in request.draft.lines
        ],
        "shippingAddress": request.address.to_payload(),
        "paymentMethod": request.payment_method,
        "totalAmount": float(request.draft.total),
    }


def order_id_from(payload: Any) -> str | None:
    if not isinstance(payload, dict):
        return None
    order = payload.get("order") if isinstance(payload.get("order"), dict) else payload
    order_id = order.get("_id") or order.get("id")
    return str(order_id) if order_id is not None else None
