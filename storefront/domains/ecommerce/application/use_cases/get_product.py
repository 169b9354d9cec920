"""
Get Product Use Case
"""

from storefront.core.domain import ProductNotFoundException
from storefront.domains.ecommerce.application.ports import IProductRepository
from storefront.domains.ecommerce.domain.entities.product import Product


class GetProductUseCase:
    """Single product by id, whether active or soft-deleted."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product:
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        return product
