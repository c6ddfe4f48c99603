from storefront_client.infrastructure.configuration.storefront_settings import StorefrontSettings

__all__ = ["StorefrontSettings"]
