from abc import ABC, abstractmethod

from storefront_client.core.domain.catalog import Product


class CatalogPort(ABC):
    @abstractmethod
    async def list_products(self) -> list[Product]:
        pass

    @abstractmethod
    async def get_product(self, product_id: str) -> Product:
        pass

    @abstractmethod
    async def search_products(self, query: str) -> list[Product]:
        pass
