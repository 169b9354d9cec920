"""
Product Repository Implementation

SQLAlchemy implementation of IProductRepository.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import ConflictException, Money
from storefront.domains.ecommerce.application.ports import IProductRepository
from storefront.domains.ecommerce.domain.entities.product import Product
from storefront.models.db.catalog import Product as ProductModel

logger = logging.getLogger(__name__)


class SQLAlchemyProductRepository(IProductRepository):
    """
    SQLAlchemy implementation of product repository.

    Catalog writes (create, update, soft delete, restore) commit on their own.
    The checkout operations (lock_for_checkout, decrement_stock, get_stock)
    never commit: they belong to the caller's transaction.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID."""
        model = await self.session.get(ProductModel, product_id)
        return self._to_entity(model) if model else None

    async def list_active(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        stmt = select(ProductModel).where(ProductModel.deleted.is_(False)).order_by(ProductModel.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_active(self) -> int:
        result = await self.session.execute(
            select(func.count(ProductModel.id)).where(ProductModel.deleted.is_(False))
        )
        return result.scalar_one()

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.deleted.asc(), ProductModel.id.desc())
        if limit is not None:
            stmt = stmt.limit(limit).offset(offset)
        result = await self.session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_all(self) -> int:
        result = await self.session.execute(select(func.count(ProductModel.id)))
        return result.scalar_one()

    async def create(self, product: Product) -> Product:
        """Create a new product."""
        model = ProductModel(
            name=product.name,
            description=product.description,
            price=product.price.amount,
            stock=product.stock,
            image_url=product.image_url,
            deleted=False,
        )
        self.session.add(model)
        await self.session.commit()
        return self._to_entity(model)

    async def update(self, product: Product) -> Product | None:
        """Write the editable fields of an existing product."""
        model = await self.session.get(ProductModel, product.id)
        if model is None:
            return None

        model.name = product.name
        model.description = product.description
        model.price = product.price.amount
        model.stock = product.stock
        model.image_url = product.image_url
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return self._to_entity(model)

    async def soft_delete(self, product_id: int) -> Product | None:
        """
        Mark a product deleted.

        Raises:
            ConflictException: The store refused the change on integrity grounds
        """
        model = await self.session.get(ProductModel, product_id)
        if model is None:
            return None

        product = self._to_entity(model)
        product.soft_delete()
        self._apply_deletion_state(model, product)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Soft delete of product {product_id} refused: {e.orig}")
            raise ConflictException("Product", product_id) from e
        return product

    async def restore(self, product_id: int) -> Product | None:
        model = await self.session.get(ProductModel, product_id)
        if model is None:
            return None

        product = self._to_entity(model)
        product.restore()
        self._apply_deletion_state(model, product)
        await self.session.commit()
        return product

    # Checkout

    async def lock_for_checkout(self, product_ids: list[int]) -> dict[int, Product]:
        """
        Read products with a row lock held until the transaction ends.

        Rows are locked in ascending id order. Stores without row locks
        (SQLite) ignore FOR UPDATE.
        """
        if not product_ids:
            return {}
        result = await self.session.execute(
            select(ProductModel)
            .where(ProductModel.id.in_(product_ids))
            .order_by(ProductModel.id)
            .with_for_update()
            .execution_options(populate_existing=True)
        )
        return {m.id: self._to_entity(m) for m in result.scalars().all()}

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Guarded decrement: no row changes when stock < quantity."""
        result = await self.session.execute(
            update(ProductModel)
            .where(ProductModel.id == product_id, ProductModel.stock >= quantity)
            .values(stock=ProductModel.stock - quantity, updated_at=datetime.now(UTC))
            .execution_options(synchronize_session=False)
        )
        return result.rowcount == 1

    async def get_stock(self, product_id: int) -> int | None:
        result = await self.session.execute(select(ProductModel.stock).where(ProductModel.id == product_id))
        return result.scalar_one_or_none()

    @staticmethod
    def _apply_deletion_state(model: ProductModel, product: Product) -> None:
        model.deleted = product.deleted
        model.deleted_at = product.deleted_at
        model.updated_at = product.updated_at

    def _to_entity(self, model: ProductModel) -> Product:
        """Convert database model to domain entity."""
        return Product(
            id=model.id,
            name=model.name,
            description=model.description,
            price=Money(model.price),
            stock=model.stock,
            image_url=model.image_url,
            deleted=bool(model.deleted),
            deleted_at=model.deleted_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
