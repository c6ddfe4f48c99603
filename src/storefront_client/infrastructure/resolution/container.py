"""Functional DI container: builds a fully wired StorefrontSession over HTTP."""

import httpx
import structlog

from storefront_client.core.application.cart import CartCoordinator
from storefront_client.core.application.chat import ChatIntentBridge, ChatTranscript
from storefront_client.core.application.session import StorefrontSession
from storefront_client.core.application.workflows.checkout import CheckoutWorkflow
from storefront_client.core.domain.checkout import ShippingPolicy
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_client.infrastructure.configuration import StorefrontSettings
from storefront_client.infrastructure.observability import configure_logging, configure_tracing
from storefront_client.infrastructure.tools.cart.http_cart_repository import HttpCartRepository
from storefront_client.infrastructure.tools.catalog.http_catalog_client import HttpCatalogClient
from storefront_client.infrastructure.tools.chat.http_chat_client import HttpChatClient
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)
from storefront_client.infrastructure.tools.orders.http_order_client import HttpOrderClient

logger = structlog.get_logger()


def build_storefront_session(
    settings: StorefrontSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> StorefrontSession:
    """Wire adapters, coordinator, chat bridge and checkout for one session.

    Raises:
        ConfigurationError: no bearer token is configured.
    """
    settings = settings or StorefrontSettings()
    configure_logging(settings)
    configure_tracing(settings)
    settings.validate_credentials()

    http = StorefrontHttpClient(settings, client=http_client)
    reads = RetryPolicy.for_reads(settings)

    coordinator = CartCoordinator(HttpCartRepository(http, reads))
    transcript = ChatTranscript(settings.chat_greeting)
    bridge = ChatIntentBridge(HttpChatClient(http), coordinator, transcript)
    checkout = CheckoutWorkflow(
        coordinator,
        HttpOrderClient(http),
        ShippingPolicy(settings.free_shipping_threshold, settings.flat_shipping_cost),
    )
    logger.info("Storefront session wired", source_system="storefront-api", api_url=settings.api_url)
    return StorefrontSession(
        coordinator,
        transcript,
        bridge,
        checkout,
        HttpCatalogClient(http, reads),
        aclose=http.aclose,
    )
