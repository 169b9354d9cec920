"""
Product Management Use Cases

Administrative catalog writes: create, update, soft delete and restore.
Callers must check for administrator access first.
"""

import logging

from storefront.core.domain import Money, ProductNotFoundException
from storefront.domains.ecommerce.application.dto import ProductData
from storefront.domains.ecommerce.application.ports import IProductRepository
from storefront.domains.ecommerce.domain.entities.product import Product

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """Use Case: Create Product"""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, data: ProductData) -> Product:
        product = Product.create(
            name=data.name,
            price=data.price,
            stock=data.stock,
            description=data.description,
            image_url=data.image_url,
        )
        created = await self.product_repository.create(product)
        logger.info(f"Product {created.id} created: {created.name}")
        return created


class UpdateProductUseCase:
    """Use Case: Update Product

    Replaces the editable fields. Orders placed earlier keep the unit price
    they were placed with.
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int, data: ProductData) -> Product:
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)

        product.update_details(
            name=data.name,
            price=Money(data.price),
            stock=data.stock,
            description=data.description,
            image_url=data.image_url,
        )
        updated = await self.product_repository.update(product)
        if updated is None:
            raise ProductNotFoundException(product_id)

        logger.info(f"Product {product_id} updated")
        return updated


class DeleteProductUseCase:
    """Use Case: Soft Delete Product

    Raises:
        ProductNotFoundException: No product with this id
        ConflictException: Other records prevent the change
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product:
        product = await self.product_repository.soft_delete(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        logger.info(f"Product {product_id} soft-deleted")
        return product


class RestoreProductUseCase:
    """Use Case: Restore Product"""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: int) -> Product:
        product = await self.product_repository.restore(product_id)
        if product is None:
            raise ProductNotFoundException(product_id)
        logger.info(f"Product {product_id} restored")
        return product
