from storefront_client.core.domain.catalog.product import Product
from storefront_client.core.domain.catalog.variant_selector import (
    VariantSelection,
    VariantStatus,
    check_completeness,
    option_label,
    select_variant,
)

__all__ = [
    "Product",
    "VariantSelection",
    "VariantStatus",
    "check_completeness",
    "option_label",
    "select_variant",
]
