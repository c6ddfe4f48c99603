from storefront_client.core.application.exceptions.provider_error import (
    CartAddError,
    CartClearError,
    CartFetchError,
    CartOperationError,
    CartRemoveError,
    CartUpdateError,
    CatalogError,
    ChatError,
    OrderError,
    ProviderError,
    TransportError,
)
from storefront_client.core.application.exceptions.storefront_errors import (
    AuthError,
    CheckoutError,
    ConfigurationError,
    ConflictingMutationError,
    EmptyCartError,
    InvalidVariantError,
    StorefrontError,
    ValidationError,
)

__all__ = [
    "AuthError",
    "CartAddError",
    "CartClearError",
    "CartFetchError",
    "CartOperationError",
    "CartRemoveError",
    "CartUpdateError",
    "CatalogError",
    "ChatError",
    "CheckoutError",
    "ConfigurationError",
    "ConflictingMutationError",
    "EmptyCartError",
    "InvalidVariantError",
    "OrderError",
    "ProviderError",
    "StorefrontError",
    "TransportError",
    "ValidationError",
]
