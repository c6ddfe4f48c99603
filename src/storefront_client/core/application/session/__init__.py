from storefront_client.core.application.session.storefront_session import StorefrontSession

__all__ = ["StorefrontSession"]
