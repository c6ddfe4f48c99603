from storefront_client.infrastructure.observability.logging.storefront_processor import (
    StorefrontSchemaProcessor,
    storefront_schema_processor,
)

__all__ = ["StorefrontSchemaProcessor", "storefront_schema_processor"]
