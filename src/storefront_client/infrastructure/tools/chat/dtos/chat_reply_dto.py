from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from storefront_client.infrastructure.tools.common.dtos.product_payload_dto import ProductPayloadDTO


class ChatReplyDTO(BaseModel):
    """``POST /chat/message`` body: ``{response, products?, intent?}``."""

    model_config = ConfigDict(extra="ignore")

    response: str = ""
    products: list[ProductPayloadDTO] = Field(default_factory=list)
    intent: str | None = None

    @field_validator("response", mode="before")
    @classmethod
    def null_response(cls, v: Any) -> Any:
        return v or ""

    @field_validator("products", mode="before")
    @classmethod
    def null_products(cls, v: Any) -> Any:
        return v or []

    @field_validator("intent", mode="before")
    @classmethod
    def blank_intent(cls, v: Any) -> Any:
        return v or None
