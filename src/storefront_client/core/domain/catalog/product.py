from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Product:
    """Catalog item as the storefront sees it. Owned by the catalog service."""

    product_id: str
    name: str
    price: Decimal
    brand: str = ""
    sizes: tuple[str, ...] = ()
    colors: tuple[str, ...] = ()
    image: str | None = None
    description: str = ""

    def __post_init__(self) -> None:
        if not self.product_id:
            raise ValueError("A product needs an identifier.")
        if self.price < 0:
            raise ValueError(f"Product '{self.product_id}' has a negative price: {self.price}")

    def offers_size(self, size: str) -> bool:
        return size in self.sizes

    def offers_color(self, color: str) -> bool:
        return color in self.colors
