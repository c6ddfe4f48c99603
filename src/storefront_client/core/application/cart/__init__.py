from storefront_client.core.application.cart.cart_coordinator import CartCoordinator
from storefront_client.core.application.cart.cart_events import (
    CartErrorRaised,
    CartEvent,
    CartListener,
    MutationStateChanged,
    SnapshotPublished,
)
from storefront_client.core.application.cart.cart_mutations import (
    WHOLE_CART,
    AddItem,
    CartMutation,
    ClearCart,
    LineRef,
    MutationKey,
    MutationKind,
    RemoveItem,
    SetQuantity,
    WholeCart,
    normalize,
)
from storefront_client.core.application.cart.cart_operation_result import (
    CartErr,
    CartOk,
    CartOperationResult,
)
from storefront_client.core.application.cart.mutation_state import MutationState, PendingMutation

__all__ = [
    "WHOLE_CART",
    "AddItem",
    "CartCoordinator",
    "CartErr",
    "CartErrorRaised",
    "CartEvent",
    "CartListener",
    "CartMutation",
    "CartOk",
    "CartOperationResult",
    "ClearCart",
    "LineRef",
    "MutationKey",
    "MutationKind",
    "MutationState",
    "MutationStateChanged",
    "PendingMutation",
    "RemoveItem",
    "SetQuantity",
    "SnapshotPublished",
    "WholeCart",
    "normalize",
]
