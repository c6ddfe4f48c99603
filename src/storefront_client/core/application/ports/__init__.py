from storefront_client.core.application.ports.cart_repository_port import CartRepositoryPort
from storefront_client.core.application.ports.catalog_port import CatalogPort
from storefront_client.core.application.ports.chat_port import ChatPort
from storefront_client.core.application.ports.order_port import OrderPort

__all__ = ["CartRepositoryPort", "CatalogPort", "ChatPort", "OrderPort"]
