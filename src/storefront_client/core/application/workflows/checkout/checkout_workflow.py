"""Checkout pipeline: Validate -> Draft -> Submit -> Clear."""

from dataclasses import dataclass

import structlog

from storefront_client.core.application.cart import CartCoordinator, CartErr, ClearCart
from storefront_client.core.application.exceptions import EmptyCartError, ValidationError
from storefront_client.core.application.ports import OrderPort
from storefront_client.core.domain.cart import CartSnapshot
from storefront_client.core.domain.checkout import (
    OrderConfirmation,
    OrderDraft,
    OrderRequest,
    ShippingAddress,
    ShippingPolicy,
)
from storefront_client.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


@dataclass(frozen=True)
class CheckoutResult:
    confirmation: OrderConfirmation
    cleared: bool
    snapshot: CartSnapshot


class CheckoutWorkflow:
    """Third mutation path: places the order, then empties the cart via the coordinator."""

    def __init__(
        self,
        coordinator: CartCoordinator,
        orders: OrderPort,
        policy: ShippingPolicy | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._orders = orders
        self._policy = policy or ShippingPolicy()

    def preview(self) -> OrderDraft:
        """Order summary for the current snapshot. Raises EmptyCartError."""
        return OrderDraft.from_snapshot(self._authoritative_snapshot(), self._policy)

    @trace_operation("workflow.checkout")
    async def place_order(
        self, address: ShippingAddress, payment_method: str = "card"
    ) -> CheckoutResult:
        """Submit the order built from the published cart.

        Raises:
            ValidationError: the shipping address has blank fields.
            EmptyCartError: nothing authoritative to order.
            OrderError: the order was rejected; the cart is left untouched.
            AuthError: the session was rejected.
        """
        self._step_1_validate_address(address)
        draft = self._step_2_build_draft()
        confirmation = await self._step_3_submit(OrderRequest(draft, address, payment_method))
        cleared = await self._step_4_clear_cart()
        return CheckoutResult(confirmation, cleared, self._coordinator.snapshot)

    # ── Step Methods ──

    def _step_1_validate_address(self, address: ShippingAddress) -> None:
        missing = address.missing_fields()
        if missing:
            raise ValidationError(
                "Shipping address is incomplete", context={"missing": list(missing)}
            )

    def _step_2_build_draft(self) -> OrderDraft:
        draft = self.preview()
        logger.info(
            "Step 2: Order draft built",
            line_count=len(draft.lines),
            subtotal=str(draft.subtotal),
            shipping=str(draft.shipping),
        )
        return draft

    async def _step_3_submit(self, request: OrderRequest) -> OrderConfirmation:
        logger.info("Step 3: Submitting order", total=str(request.draft.total))
        confirmation = await self._orders.place_order(request)
        logger.info("Order accepted", order_id=confirmation.order_id)
        return confirmation

    async def _step_4_clear_cart(self) -> bool:
        result = await self._coordinator.mutate(ClearCart())
        if isinstance(result, CartErr):
            # The order stands; the cart simply still shows its lines
            logger.warning(
                "Order placed but cart could not be cleared",
                error_type=type(result.error).__name__,
                error_details=str(result.error),
            )
            return False
        return True

    def _authoritative_snapshot(self) -> CartSnapshot:
        snapshot = self._coordinator.snapshot
        if not self._coordinator.is_authoritative or snapshot.is_empty:
            raise EmptyCartError(
                "There is nothing to check out",
                context={"authoritative": self._coordinator.is_authoritative},
            )
        return snapshot
