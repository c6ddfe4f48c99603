from decimal import Decimal
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from storefront_client.core.domain.catalog import option_label
from storefront_client.infrastructure.tools.common.dtos.product_payload_dto import (
    ProductPayloadDTO,
    as_decimal,
)


class CartLinePayloadDTO(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    line_id: str = Field(validation_alias=AliasChoices("_id", "id", "itemId"))
    product: ProductPayloadDTO
    size: str = ""
    color: str = ""
    quantity: int

    @field_validator("size", "color", mode="before")
    @classmethod
    def normalise_option(cls, v: Any) -> str:
        return option_label(v)


class CartPayloadDTO(BaseModel):
    """``GET /cart`` body: ``{items: CartLine[], total}``."""

    model_config = ConfigDict(extra="ignore")

    items: list[CartLinePayloadDTO] = Field(default_factory=list)
    total: Decimal = Decimal("0")

    @field_validator("items", mode="before")
    @classmethod
    def null_items(cls, v: Any) -> Any:
        return v or []

    @field_validator("total", mode="before")
    @classmethod
    def parse_total(cls, v: Any) -> Decimal:
        return as_decimal(v)
