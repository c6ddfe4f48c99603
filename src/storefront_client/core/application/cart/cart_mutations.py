"""Closed set of cart commands accepted by the coordinator."""

from dataclasses import dataclass
from enum import StrEnum

from storefront_client.core.domain.cart import LineKey


class MutationKind(StrEnum):
    ADD_ITEM = "add_item"
    SET_QUANTITY = "set_quantity"
    REMOVE_ITEM = "remove_item"
    CLEAR_CART = "clear_cart"


@dataclass(frozen=True)
class AddItem:
    product_id: str
    size: str
    color: str
    quantity: int = 1

    kind = MutationKind.ADD_ITEM


@dataclass(frozen=True)
class SetQuantity:
    line_id: str
    quantity: int

    kind = MutationKind.SET_QUANTITY


@dataclass(frozen=True)
class RemoveItem:
    line_id: str

    kind = MutationKind.REMOVE_ITEM


@dataclass(frozen=True)
class ClearCart:
    kind = MutationKind.CLEAR_CART


CartMutation = AddItem | SetQuantity | RemoveItem | ClearCart


# ── Pending-set keys ──


@dataclass(frozen=True)
class LineRef:
    """Key for a line the current snapshot does not know yet."""

    line_id: str

    def __str__(self) -> str:
        return f"line:{self.line_id}"


@dataclass(frozen=True)
class WholeCart:
    def __str__(self) -> str:
        return "cart"


WHOLE_CART = WholeCart()

MutationKey = LineKey | LineRef | WholeCart


def normalize(mutation: CartMutation) -> CartMutation:
    """A quantity below one removes the line."""
    if isinstance(mutation, SetQuantity) and mutation.quantity < 1:
        return RemoveItem(mutation.line_id)
    return mutation
