"""Turns assistant replies into cart commands.

The bridge never touches the snapshot. Cart changes it wants go through
``CartCoordinator.mutate``; changes the assistant already made server-side
are picked up with ``CartCoordinator.refresh``.
"""

import structlog

from storefront_client.core.application.cart import (
    AddItem,
    CartCoordinator,
    CartErr,
    CartOk,
)
from storefront_client.core.application.chat.chat_replies import (
    ADD_CONFLICT,
    ADD_FAILURE,
    CHAT_FAILURE,
    confirmation,
    incomplete_selection,
    invalid_selection,
)
from storefront_client.core.application.chat.chat_transcript import ChatTranscript
from storefront_client.core.application.exceptions import (
    ConflictingMutationError,
    ProviderError,
    ValidationError,
)
from storefront_client.core.application.ports import ChatPort
from storefront_client.core.domain.catalog import Product, VariantStatus, select_variant
from storefront_client.core.domain.chat import CartIntent, ChatMessage, VariantRequest
from storefront_client.infrastructure.observability.metrics_service import CHAT_TURNS_TOTAL

logger = structlog.get_logger()


class ChatIntentBridge:
    def __init__(
        self, chat: ChatPort, coordinator: CartCoordinator, transcript: ChatTranscript
    ) -> None:
        self._chat = chat
        self._coordinator = coordinator
        self._transcript = transcript

    @property
    def transcript(self) -> ChatTranscript:
        return self._transcript

    async def send_message(self, text: str, variant: VariantRequest | None = None) -> ChatMessage:
        """Run one chat turn and return the last message it appended.

        Raises:
            ValidationError: ``text`` is blank; nothing is appended or sent.
            AuthError: the session was rejected.
        """
        content = text.strip()
        if not content:
            raise ValidationError("Chat message must not be empty")

        self._transcript.append(ChatMessage.user(content))
        try:
            reply = await self._chat.send_message(content)
        except ProviderError as exc:
            CHAT_TURNS_TOTAL.labels(outcome="error").inc()
            logger.warning(
                "Chat turn failed",
                processing_status="ERROR",
                error_type=type(exc).__name__,
                error_details=str(exc),
                error_retryable=exc.retryable,
            )
            return self._say(CHAT_FAILURE)

        CHAT_TURNS_TOTAL.labels(outcome="success").inc()
        logger.info("Chat turn answered", intent=reply.intent, products=len(reply.products))
        self._transcript.append(ChatMessage.assistant(reply.text, reply.products, reply.intent))

        if not reply.affects_cart:
            return self._transcript.last
        if reply.intent == CartIntent.ADD_TO_CART and variant is not None:
            return await self._add_to_cart(
                variant.product, variant.size, variant.color, variant.quantity
            )
        # Applied server-side by the assistant
        await self._coordinator.refresh()
        return self._transcript.last

    async def add_recommended_product(
        self, product: Product, size: object, color: object, quantity: int = 1
    ) -> ChatMessage:
        """Product-card path inside the chat window."""
        return await self._add_to_cart(product, size, color, quantity)

    async def _add_to_cart(
        self, product: Product, size: object, color: object, quantity: int
    ) -> ChatMessage:
        selection = select_variant(product, size, color)
        if selection.status is VariantStatus.INCOMPLETE:
            return self._say(incomplete_selection(selection))
        if selection.status is VariantStatus.INVALID:
            return self._say(invalid_selection(product, selection))

        result = await self._coordinator.mutate(
            AddItem(product.product_id, selection.size, selection.color, quantity)
        )
        match result:
            case CartOk():
                return self._say(confirmation(product, selection))
            case CartErr(error=ConflictingMutationError()):
                return self._say(ADD_CONFLICT)
            case CartErr():
                return self._say(ADD_FAILURE)

    def _say(self, text: str) -> ChatMessage:
        return self._transcript.append(ChatMessage.assistant(text))
