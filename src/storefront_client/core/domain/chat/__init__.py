from storefront_client.core.domain.chat.assistant_reply import (
    AssistantReply,
    CartIntent,
    VariantRequest,
    is_cart_affecting,
)
from storefront_client.core.domain.chat.chat_message import ChatMessage, ChatRole

__all__ = [
    "AssistantReply",
    "CartIntent",
    "ChatMessage",
    "ChatRole",
    "VariantRequest",
    "is_cart_affecting",
]
