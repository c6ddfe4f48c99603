"""Prometheus metrics declarations for the storefront client.

All metrics are declared statically at module level.
Labels use ONLY static enumerations, never line ids or product ids.
"""

from prometheus_client import Counter, Histogram

# ── Cart coordinator metrics ──────────────────────────────────────

CART_REFRESH_TOTAL = Counter(
    "storefront_cart_refresh_total",
    "Cart fetches resolved by the coordinator",
    ["outcome"],
)

CART_MUTATIONS_TOTAL = Counter(
    "storefront_cart_mutations_total",
    "Cart mutations requested through the coordinator",
    ["operation", "outcome"],
)

# ── HTTP transport metrics ────────────────────────────────────────

HTTP_REQUESTS_TOTAL = Counter(
    "storefront_http_requests_total",
    "Requests sent to the storefront API",
    ["method", "outcome"],
)

HTTP_LATENCY_SECONDS = Histogram(
    "storefront_http_latency_seconds",
    "Storefront API round-trip latency in seconds",
    ["method"],
)

# ── Chat metrics ──────────────────────────────────────────────────

CHAT_TURNS_TOTAL = Counter(
    "storefront_chat_turns_total",
    "Chat turns sent to the assistant",
    ["outcome"],
)
