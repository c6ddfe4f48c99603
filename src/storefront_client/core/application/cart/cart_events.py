"""Events delivered to coordinator subscribers."""

from collections.abc import Callable
from dataclasses import dataclass

from storefront_client.core.application.cart.cart_mutations import MutationKey
from storefront_client.core.application.cart.mutation_state import MutationState
from storefront_client.core.application.exceptions import StorefrontError
from storefront_client.core.domain.cart import CartSnapshot


@dataclass(frozen=True)
class SnapshotPublished:
    snapshot: CartSnapshot


@dataclass(frozen=True)
class CartErrorRaised:
    error: StorefrontError


@dataclass(frozen=True)
class MutationStateChanged:
    key: MutationKey
    state: MutationState


CartEvent = SnapshotPublished | CartErrorRaised | MutationStateChanged

CartListener = Callable[[CartEvent], None]
