"""Assistant-side texts the bridge writes into the transcript on its own."""

from storefront_client.core.domain.catalog import Product, VariantSelection

CHAT_FAILURE = "Sorry, I encountered an error. Please try again or contact support."
ADD_FAILURE = "Sorry, I couldn't add that item to your cart. Please try again."
ADD_CONFLICT = "That item is already being updated in your cart. Please wait a moment."


def confirmation(product: Product, selection: VariantSelection) -> str:
    return (
        f"Great! I've added the {product.name} in {selection.color} "
        f"(size {selection.size}) to your cart."
    )


def incomplete_selection(selection: VariantSelection) -> str:
    return f"Please select {' and '.join(selection.missing)} before adding to your cart."


def invalid_selection(product: Product, selection: VariantSelection) -> str:
    chosen = {"size": f"size {selection.size}", "color": selection.color}
    missing = " in ".join(chosen[name] for name in selection.unavailable)
    return f"Sorry, the {product.name} isn't available in {missing}."
