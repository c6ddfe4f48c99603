from decimal import Decimal, InvalidOperation
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from storefront_client.core.domain.catalog import option_label


def as_decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    try:
        # str() first so 19.99 stays 19.99 instead of its binary expansion
        amount = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"not a money amount: {value!r}") from exc
    if not amount.is_finite():
        raise ValueError(f"not a money amount: {value!r}")
    return amount


class ProductPayloadDTO(BaseModel):
    """Product as the storefront API returns it, inside carts, lists and chat replies."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True, coerce_numbers_to_str=True)

    product_id: str = Field(validation_alias=AliasChoices("_id", "id", "productId"))
    name: str = ""
    brand: str = ""
    price: Decimal = Decimal("0")
    sizes: list[str] = Field(default_factory=list)
    colors: list[str] = Field(default_factory=list)
    image: str | None = None
    description: str = ""

    @field_validator("price", mode="before")
    @classmethod
    def parse_price(cls, v: Any) -> Decimal:
        return as_decimal(v)

    @field_validator("sizes", "colors", mode="before")
    @classmethod
    def normalise_options(cls, v: Any) -> list[str]:
        if not v:
            return []
        return [label for label in map(option_label, v) if label]
