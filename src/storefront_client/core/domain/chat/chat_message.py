from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum

from storefront_client.core.domain.catalog.product import Product


class ChatRole(StrEnum):
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    text: str
    products: tuple[Product, ...] = ()
    intent: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    @classmethod
    def user(cls, text: str) -> "ChatMessage":
        return cls(role=ChatRole.USER, text=text)

    @classmethod
    def assistant(
        cls, text: str, products: tuple[Product, ...] = (), intent: str | None = None
    ) -> "ChatMessage":
        return cls(role=ChatRole.ASSISTANT, text=text, products=products, intent=intent)
