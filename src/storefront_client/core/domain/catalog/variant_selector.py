"""Size/color selection checks shared by the catalog view and the chat path.

Both functions are pure: no I/O, no stored state.
"""

from dataclasses import dataclass
from enum import StrEnum

from storefront_client.core.domain.catalog.product import Product


class VariantStatus(StrEnum):
    VALID = "VALID"
    INCOMPLETE = "INCOMPLETE"
    INVALID = "INVALID"


@dataclass(frozen=True)
class VariantSelection:
    status: VariantStatus
    size: str
    color: str
    missing: tuple[str, ...] = ()
    unavailable: tuple[str, ...] = ()

    @property
    def is_valid(self) -> bool:
        return self.status is VariantStatus.VALID


def option_label(value: object) -> str:
    """Normalise a size/color option to the string form used on the wire.

    Sizes come back from the API as numbers (``9``, ``9.5``) or strings.
    """
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    return str(value).strip()


def check_completeness(size: object, color: object) -> VariantSelection:
    """Flag missing options without knowing which product they belong to."""
    size_label, color_label = option_label(size), option_label(color)
    missing = tuple(
        name for name, label in (("size", size_label), ("color", color_label)) if not label
    )
    status = VariantStatus.INCOMPLETE if missing else VariantStatus.VALID
    return VariantSelection(status=status, size=size_label, color=color_label, missing=missing)


def select_variant(product: Product, size: object, color: object) -> VariantSelection:
    """Validate a (size, color) pair against the options a product offers.

    ``INCOMPLETE`` means something was not chosen; ``INVALID`` means a choice was
    made that this product does not offer. The two drive different messages.
    """
    selection = check_completeness(size, color)
    if not selection.is_valid:
        return selection

    unavailable: list[str] = []
    if not product.offers_size(selection.size):
        unavailable.append("size")
    if not product.offers_color(selection.color):
        unavailable.append("color")
    if unavailable:
        return VariantSelection(
            status=VariantStatus.INVALID,
            size=selection.size,
            color=selection.color,
            unavailable=tuple(unavailable),
        )
    return selection
