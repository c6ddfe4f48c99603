"""Single owner of the published cart snapshot.

Every cart change, whether it starts in the sidebar, the chat window or the
checkout, goes through ``mutate()``; every read goes through ``snapshot``.
The remote cart stays authoritative: a mutation is never applied locally,
the coordinator re-fetches after each acknowledgement.

Fetch ordering:
    At most one fetch is in flight. Callers of ``refresh()`` attach to it.
    A post-mutation refresh waits out a fetch dispatched before the
    acknowledgement and attaches to (or starts) one dispatched after it.
    Snapshots are published in dispatch order; ``reset()`` invalidates any
    fetch still running, and a mutation acknowledged after ``reset()``
    does not refresh.
"""

import asyncio
from collections.abc import Callable

import structlog

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
    RemoveItem,
    SetQuantity,
    normalize,
)
from storefront_client.core.application.cart.cart_operation_result import (
    CartErr,
    CartOk,
    CartOperationResult,
)
from storefront_client.core.application.cart.mutation_state import (
    MutationState,
    PendingMutation,
)
from storefront_client.core.application.exceptions import (
    AuthError,
    CartFetchError,
    ConflictingMutationError,
    InvalidVariantError,
    ProviderError,
    StorefrontError,
    ValidationError,
)
from storefront_client.core.application.ports import CartRepositoryPort
from storefront_client.core.domain.cart import CartSnapshot, LineKey
from storefront_client.core.domain.catalog import VariantStatus, check_completeness
from storefront_client.infrastructure.observability.metrics_service import (
    CART_MUTATIONS_TOTAL,
    CART_REFRESH_TOTAL,
)

logger = structlog.get_logger()


class CartCoordinator:
    def __init__(self, repository: CartRepositoryPort) -> None:
        self._repository = repository
        self._snapshot = CartSnapshot.empty()
        self._authoritative = False
        self._listeners: list[CartListener] = []
        self._pending: dict[MutationKey, PendingMutation] = {}
        self._inflight: asyncio.Task[CartOperationResult] | None = None
        self._inflight_seq = 0
        self._dispatched = 0
        self._published_seq = 0
        self._epoch = 0

    # ── Read side ──

    @property
    def snapshot(self) -> CartSnapshot:
        return self._snapshot

    @property
    def is_authoritative(self) -> bool:
        """False until the first successful fetch, and again after ``reset()``."""
        return self._authoritative

    @property
    def badge_count(self) -> int:
        return self._snapshot.item_count

    @property
    def pending_keys(self) -> frozenset[MutationKey]:
        return frozenset(self._pending)

    def pending_state(self, key: MutationKey) -> MutationState:
        entry = self._pending.get(key)
        return entry.state if entry else MutationState.IDLE

    # ── Subscriptions ──

    def subscribe(self, listener: CartListener) -> Callable[[], None]:
        self._listeners.append(listener)
        return lambda: self.unsubscribe(listener)

    def unsubscribe(self, listener: CartListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _emit(self, event: CartEvent) -> None:
        for listener in tuple(self._listeners):
            try:
                listener(event)
            except Exception as exc:
                logger.warning(
                    "Cart listener raised; continuing delivery",
                    event_kind=type(event).__name__,
                    error_type=type(exc).__name__,
                    error_details=str(exc),
                )

    # ── Refresh ──

    async def refresh(self) -> CartOperationResult:
        """Fetch the remote cart, sharing any fetch already in flight.

        Raises:
            AuthError: after publishing it, when the session is rejected.
        """
        task = self._inflight or self._dispatch_fetch()
        return await asyncio.shield(task)

    def _dispatch_fetch(self) -> "asyncio.Task[CartOperationResult]":
        self._dispatched += 1
        seq = self._dispatched
        task = asyncio.get_running_loop().create_task(self._fetch(seq))
        self._inflight, self._inflight_seq = task, seq
        return task

    async def _fetch(self, seq: int) -> CartOperationResult:
        try:
            try:
                snapshot = await self._repository.fetch_cart()
            except AuthError as exc:
                CART_REFRESH_TOTAL.labels(outcome="unauthorized").inc()
                self._emit(CartErrorRaised(exc))
                raise
            except ProviderError as exc:
                return self._fetch_failed(seq, exc)
            return self._publish(seq, snapshot)
        finally:
            if self._inflight_seq == seq:
                self._inflight = None

    def _publish(self, seq: int, snapshot: CartSnapshot) -> CartOperationResult:
        if seq < self._published_seq:
            CART_REFRESH_TOTAL.labels(outcome="superseded").inc()
            logger.info("Discarding superseded cart snapshot", fetch_seq=seq)
            return CartOk(self._snapshot)

        duplicates = snapshot.duplicate_keys
        if duplicates:
            error = CartFetchError(
                message=f"Cart payload holds duplicate lines for {sorted(map(str, duplicates))}",
                retryable=True,
            )
            return self._fetch_failed(seq, error)

        if not snapshot.has_consistent_total:
            logger.warning(
                "Cart total disagrees with its lines; recomputing",
                reported_total=str(snapshot.total),
                line_count=len(snapshot.lines),
            )
            snapshot = CartSnapshot.from_lines(snapshot.lines)

        self._snapshot = snapshot
        self._authoritative = True
        self._published_seq = seq
        CART_REFRESH_TOTAL.labels(outcome="success").inc()
        self._emit(SnapshotPublished(snapshot))
        return CartOk(snapshot)

    def _fetch_failed(self, seq: int, error: ProviderError) -> CartOperationResult:
        CART_REFRESH_TOTAL.labels(outcome="error").inc()
        logger.warning(
            "Cart refresh failed; keeping prior snapshot",
            processing_status="ERROR",
            error_type=type(error).__name__,
            error_details=str(error),
            error_retryable=error.retryable,
        )
        if seq >= self._published_seq:
            self._emit(CartErrorRaised(error))
        return CartErr(error, self._snapshot)

    async def _refresh_after(self, ack_mark: int, epoch: int) -> CartOperationResult | None:
        """Refresh with a fetch dispatched after ``ack_mark``; None once ``reset()`` has run."""
        while (task := self._inflight) is not None and self._inflight_seq <= ack_mark:
            await asyncio.wait({task})
        if epoch != self._epoch:
            return None
        return await self.refresh()

    # ── Mutations ──

    async def mutate(self, mutation: CartMutation) -> CartOperationResult:
        """Apply one cart command remotely, then refresh.

        Raises:
            AuthError: after publishing it, when the session is rejected.
        """
        mutation = normalize(mutation)
        operation = mutation.kind.value

        rejection = self._validate(mutation)
        if rejection is not None:
            CART_MUTATIONS_TOTAL.labels(operation=operation, outcome="rejected").inc()
            return CartErr(rejection, self._snapshot)

        key = self._key_for(mutation)
        conflict = self._find_conflict(key)
        if conflict is not None:
            CART_MUTATIONS_TOTAL.labels(operation=operation, outcome="conflict").inc()
            logger.info(
                "Rejecting mutation; key already pending",
                operation=operation,
                line_key=str(key),
                pending_operation=conflict.operation.value,
            )
            return CartErr(ConflictingMutationError(key, conflict.operation.value), self._snapshot)

        entry = PendingMutation(mutation.kind, key)
        self._pending[key] = entry
        self._emit(MutationStateChanged(key, MutationState.PENDING))
        try:
            return await self._apply(mutation, entry, self._epoch)
        finally:
            self._release(entry)

    async def _apply(
        self, mutation: CartMutation, entry: PendingMutation, epoch: int
    ) -> CartOperationResult:
        operation = mutation.kind.value
        try:
            await self._dispatch(mutation)
        except AuthError as exc:
            CART_MUTATIONS_TOTAL.labels(operation=operation, outcome="unauthorized").inc()
            self._fail(entry, exc)
            raise
        except (ProviderError, ValidationError) as exc:
            CART_MUTATIONS_TOTAL.labels(operation=operation, outcome="error").inc()
            logger.warning(
                "Cart mutation failed; keeping prior snapshot",
                processing_status="ERROR",
                operation=operation,
                line_key=str(entry.key),
                error_type=type(exc).__name__,
                error_details=str(exc),
            )
            self._fail(entry, exc)
            return CartErr(exc, self._snapshot)

        ack_mark = self._dispatched
        CART_MUTATIONS_TOTAL.labels(operation=operation, outcome="success").inc()
        self._transition(entry, MutationState.APPLIED)
        refreshed = await self._refresh_after(ack_mark, epoch)
        if refreshed is None:
            logger.info(
                "Cart reset while mutation was in flight; not refreshing",
                operation=operation,
                line_key=str(entry.key),
            )
            return CartOk(self._snapshot, stale=True)
        return CartOk(self._snapshot, stale=isinstance(refreshed, CartErr))

    def _validate(self, mutation: CartMutation) -> StorefrontError | None:
        if not isinstance(mutation, AddItem):
            return None
        selection = check_completeness(mutation.size, mutation.color)
        if selection.status is VariantStatus.INCOMPLETE:
            return InvalidVariantError(selection)
        if mutation.quantity < 1:
            return ValidationError(
                "Quantity to add must be at least 1",
                context={"quantity": mutation.quantity},
            )
        return None

    def _key_for(self, mutation: CartMutation) -> MutationKey:
        match mutation:
            case AddItem(product_id=product_id, size=size, color=color):
                # Keyed on the labels the repository sends
                selection = check_completeness(size, color)
                return LineKey(product_id, selection.size, selection.color)
            case SetQuantity(line_id=line_id) | RemoveItem(line_id=line_id):
                line = self._snapshot.find_line(line_id)
                return line.key if line else LineRef(line_id)
            case ClearCart():
                return WHOLE_CART

    def _find_conflict(self, key: MutationKey) -> PendingMutation | None:
        if key in self._pending:
            return self._pending[key]
        if key == WHOLE_CART and self._pending:
            return next(iter(self._pending.values()))
        return self._pending.get(WHOLE_CART)

    async def _dispatch(self, mutation: CartMutation) -> None:
        match mutation:
            case AddItem():
                await self._repository.add_item(
                    mutation.product_id, mutation.size, mutation.color, mutation.quantity
                )
            case SetQuantity():
                await self._repository.set_quantity(mutation.line_id, mutation.quantity)
            case RemoveItem():
                await self._repository.remove_item(mutation.line_id)
            case ClearCart():
                await self._repository.clear_cart()

    # ── Pending-set transitions ──

    # Entries dropped by reset() are stale: they no longer transition or emit.

    def _is_current(self, entry: PendingMutation) -> bool:
        return self._pending.get(entry.key) is entry

    def _transition(self, entry: PendingMutation, state: MutationState) -> None:
        if not self._is_current(entry):
            return
        entry.state = state
        self._emit(MutationStateChanged(entry.key, state))

    def _release(self, entry: PendingMutation) -> None:
        if not self._is_current(entry):
            return
        del self._pending[entry.key]
        self._emit(MutationStateChanged(entry.key, MutationState.IDLE))

    def _fail(self, entry: PendingMutation, error: StorefrontError) -> None:
        if not self._is_current(entry):
            return
        self._transition(entry, MutationState.FAILED)
        self._release(entry)
        self._emit(CartErrorRaised(error))

    # ── Lifecycle ──

    def reset(self) -> None:
        """Discard cart state at session teardown. In-flight fetches are ignored."""
        self._snapshot = CartSnapshot.empty()
        self._authoritative = False
        self._pending.clear()
        self._inflight = None
        self._published_seq = self._dispatched + 1
        self._epoch += 1
        self._emit(SnapshotPublished(self._snapshot))
