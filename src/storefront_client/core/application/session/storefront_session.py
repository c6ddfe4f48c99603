"""Lifecycle owner for one authenticated storefront session.

Holds the coordinator, transcript, chat bridge and checkout for as long as the
bearer token is accepted. ``close()`` and any ``AuthError`` end it the same
way: cart state reset, transcript discarded, expiry callbacks notified (auth
only), further calls refused.
"""

from collections.abc import Awaitable, Callable
from typing import TypeVar

import structlog

from storefront_client.core.application.cart import (
    CartCoordinator,
    CartErrorRaised,
    CartEvent,
    CartMutation,
    CartOperationResult,
)
from storefront_client.core.application.chat import ChatIntentBridge, ChatTranscript
from storefront_client.core.application.exceptions import AuthError
from storefront_client.core.application.ports import CatalogPort
from storefront_client.core.application.workflows.checkout import CheckoutResult, CheckoutWorkflow
from storefront_client.core.domain.catalog import Product
from storefront_client.core.domain.chat import ChatMessage, VariantRequest
from storefront_client.core.domain.checkout import ShippingAddress

logger = structlog.get_logger()

_T = TypeVar("_T")

ExpiryCallback = Callable[[AuthError], None]


class StorefrontSession:
    def __init__(
        self,
        coordinator: CartCoordinator,
        transcript: ChatTranscript,
        bridge: ChatIntentBridge,
        checkout: CheckoutWorkflow,
        catalog: CatalogPort,
        aclose: Callable[[], Awaitable[None]] | None = None,
    ) -> None:
        self._coordinator = coordinator
        self._transcript = transcript
        self._bridge = bridge
        self._checkout = checkout
        self._catalog = catalog
        self._aclose = aclose
        self._expiry_callbacks: list[ExpiryCallback] = []
        self._active = True
        self._unsubscribe = coordinator.subscribe(self._on_cart_event)

    # ── State ──

    @property
    def is_active(self) -> bool:
        return self._active

    @property
    def coordinator(self) -> CartCoordinator:
        return self._coordinator

    @property
    def transcript(self) -> ChatTranscript:
        return self._transcript

    @property
    def checkout(self) -> CheckoutWorkflow:
        return self._checkout

    def on_session_expired(self, callback: ExpiryCallback) -> None:
        self._expiry_callbacks.append(callback)

    # ── Operations ──

    async def start(self) -> CartOperationResult:
        """First refresh: turns the empty placeholder into the real cart."""
        return await self._guard(self._coordinator.refresh)

    async def refresh_cart(self) -> CartOperationResult:
        return await self._guard(self._coordinator.refresh)

    async def mutate_cart(self, mutation: CartMutation) -> CartOperationResult:
        return await self._guard(lambda: self._coordinator.mutate(mutation))

    async def send_message(self, text: str, variant: VariantRequest | None = None) -> ChatMessage:
        return await self._guard(lambda: self._bridge.send_message(text, variant))

    async def add_recommended_product(
        self, product: Product, size: object, color: object, quantity: int = 1
    ) -> ChatMessage:
        return await self._guard(
            lambda: self._bridge.add_recommended_product(product, size, color, quantity)
        )

    async def list_products(self) -> list[Product]:
        return await self._guard(self._catalog.list_products)

    async def get_product(self, product_id: str) -> Product:
        return await self._guard(lambda: self._catalog.get_product(product_id))

    async def search_products(self, query: str) -> list[Product]:
        return await self._guard(lambda: self._catalog.search_products(query))

    async def place_order(
        self, address: ShippingAddress, payment_method: str = "card"
    ) -> CheckoutResult:
        return await self._guard(lambda: self._checkout.place_order(address, payment_method))

    async def close(self) -> None:
        """Log out: discard cart and chat state and release the HTTP client."""
        self._teardown(None)
        if self._aclose is not None:
            await self._aclose()
            self._aclose = None

    # ── Teardown ──

    async def _guard(self, operation: Callable[[], Awaitable[_T]]) -> _T:
        if not self._active:
            raise AuthError("Storefront session has ended.")
        try:
            return await operation()
        except AuthError as exc:
            self._teardown(exc)
            raise

    def _on_cart_event(self, event: CartEvent) -> None:
        if isinstance(event, CartErrorRaised) and isinstance(event.error, AuthError):
            self._teardown(event.error)

    def _teardown(self, error: AuthError | None) -> None:
        if not self._active:
            return
        self._active = False
        self._unsubscribe()
        self._coordinator.reset()
        self._transcript.discard()
        logger.info("Storefront session ended", expired=error is not None)
        if error is None:
            return
        for callback in tuple(self._expiry_callbacks):
            try:
                callback(error)
            except Exception as exc:
                logger.warning(
                    "Session expiry callback raised",
                    error_type=type(exc).__name__,
                    error_details=str(exc),
                )
