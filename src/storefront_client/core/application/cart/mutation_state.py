from dataclasses import dataclass
from enum import StrEnum

from storefront_client.core.application.cart.cart_mutations import MutationKey, MutationKind


class MutationState(StrEnum):
    IDLE = "IDLE"
    PENDING = "PENDING"
    APPLIED = "APPLIED"
    FAILED = "FAILED"


@dataclass
class PendingMutation:
    """Entry of the pending set while a remote call for ``key`` is outstanding."""

    operation: MutationKind
    key: MutationKey
    state: MutationState = MutationState.PENDING
