from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from storefront_client.core.domain.cart.cart_line import CartLine, LineKey
from storefront_client.core.domain.cart.cart_model import compute_total, find_duplicate_keys

_CENT = Decimal("0.01")


@dataclass(frozen=True)
class CartSnapshot:
    """Complete state of a user's cart at one point in time."""

    lines: tuple[CartLine, ...] = ()
    total: Decimal = Decimal("0")

    @classmethod
    def empty(cls) -> "CartSnapshot":
        return cls()

    @classmethod
    def from_lines(cls, lines: Iterable[CartLine]) -> "CartSnapshot":
        materialised = tuple(lines)
        return cls(lines=materialised, total=compute_total(materialised))

    @property
    def item_count(self) -> int:
        """Badge count: units, not lines."""
        return sum(line.quantity for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def has_consistent_total(self) -> bool:
        return self.total.quantize(_CENT) == compute_total(self.lines).quantize(_CENT)

    @property
    def duplicate_keys(self) -> set[LineKey]:
        return find_duplicate_keys(self.lines)

    def find_line(self, line_id: str) -> CartLine | None:
        return next((line for line in self.lines if line.line_id == line_id), None)

    def find_by_key(self, key: LineKey) -> CartLine | None:
        return next((line for line in self.lines if line.key == key), None)
