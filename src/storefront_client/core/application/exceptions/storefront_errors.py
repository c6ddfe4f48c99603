"""Storefront exception hierarchy.

Provides a typed exception tree for the application layer so that callers
branch on the kind of failure instead of matching strings.
"""

from typing import Any

from storefront_client.core.domain.catalog.variant_selector import VariantSelection


class StorefrontError(Exception):
    """Base exception for every storefront-client error."""

    def __init__(self, message: str = "", *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = context or {}


class ConfigurationError(StorefrontError):
    """Raised when settings are invalid or incomplete."""


class AuthError(StorefrontError):
    """Missing bearer token or a 401 from the API. Ends the session."""


class ValidationError(StorefrontError):
    """Rejected locally before any request is sent."""


class InvalidVariantError(ValidationError):
    """Size and/or color missing, or not offered by the product."""

    def __init__(self, selection: VariantSelection, message: str = "") -> None:
        super().__init__(
            message or f"Variant selection is {selection.status.value.lower()}",
            context={"missing": selection.missing, "unavailable": selection.unavailable},
        )
        self.selection = selection


class ConflictingMutationError(StorefrontError):
    """Another mutation for the same cart line is still in flight."""

    def __init__(self, key: object, pending_operation: str) -> None:
        super().__init__(
            f"A '{pending_operation}' mutation is already pending for {key}",
            context={"key": str(key), "pending_operation": pending_operation},
        )
        self.key = key
        self.pending_operation = pending_operation


class CheckoutError(StorefrontError):
    """Raised when the checkout workflow cannot start or complete."""


class EmptyCartError(CheckoutError):
    """There is nothing authoritative to order."""
