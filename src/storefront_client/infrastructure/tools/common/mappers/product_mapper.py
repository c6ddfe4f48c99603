from storefront_client.core.domain.catalog import Product
from storefront_client.infrastructure.tools.common.dtos.product_payload_dto import ProductPayloadDTO


def to_product(dto: ProductPayloadDTO) -> Product:
    return Product(
        product_id=dto.product_id,
        name=dto.name,
        price=dto.price,
        brand=dto.brand,
        sizes=tuple(dict.fromkeys(dto.sizes)),
        colors=tuple(dict.fromkeys(dto.colors)),
        image=dto.image,
        description=dto.description,
    )
