from storefront_client.core.application.workflows.checkout.checkout_workflow import (
    CheckoutResult,
    CheckoutWorkflow,
)

__all__ = ["CheckoutResult", "CheckoutWorkflow"]
