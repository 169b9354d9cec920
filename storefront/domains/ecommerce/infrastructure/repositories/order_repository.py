"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from storefront.core.domain import Money
from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities.order import Order, OrderItem
from storefront.domains.ecommerce.domain.value_objects.order_status import OrderStatus
from storefront.models.db.orders import Order as OrderModel
from storefront.models.db.orders import OrderItem as OrderItemModel

logger = logging.getLogger(__name__)


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Lines are read together with the current product row, so names and
    images follow catalog edits while unit prices stay as placed.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def add(self, order: Order) -> Order:
        """
        Stage an order and its lines.

        Flushes to obtain ids; committing is left to the caller's unit of work.
        """
        model = OrderModel(
            user_id=order.user_id,
            total=order.total.amount,
            status=order.status.value,
            items=[
                OrderItemModel(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=item.unit_price.amount,
                )
                for item in order.items
            ],
        )
        self.session.add(model)
        await self.session.flush()

        order.id = model.id
        order.created_at = model.created_at
        order.updated_at = model.updated_at
        for item, item_model in zip(order.items, model.items):
            item.id = item_model.id
        return order

    async def get_by_id(self, order_id: int) -> Order | None:
        """Get order by ID."""
        result = await self.session.execute(
            self._with_lines(select(OrderModel)).where(OrderModel.id == order_id)
        )
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_user(self, user_id: int) -> list[Order]:
        """Get orders by user, newest first."""
        result = await self.session.execute(
            self._with_lines(select(OrderModel))
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return [self._to_entity(m) for m in result.scalars().all()]

    async def get_all(self) -> list[Order]:
        """Get every order with owner data, newest first."""
        result = await self.session.execute(
            self._with_lines(select(OrderModel))
            .options(selectinload(OrderModel.user))
            .order_by(OrderModel.created_at.desc(), OrderModel.id.desc())
        )
        return [self._to_entity(m, include_owner=True) for m in result.scalars().all()]

    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        """Update order status."""
        try:
            result = await self.session.execute(
                update(OrderModel)
                .where(OrderModel.id == order_id)
                .values(status=status.value, updated_at=datetime.now(UTC))
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                await self.session.rollback()
                return False
            await self.session.commit()
            return True
        except Exception as e:
            logger.error(f"Error updating status for order {order_id}: {e}")
            await self.session.rollback()
            raise

    @staticmethod
    def _with_lines(stmt):
        return stmt.options(
            selectinload(OrderModel.items).selectinload(OrderItemModel.product)
        ).execution_options(populate_existing=True)

    def _to_entity(self, model: OrderModel, include_owner: bool = False) -> Order:
        """Convert database model to domain entity."""
        order = Order(
            id=model.id,
            user_id=model.user_id,
            status=OrderStatus(model.status),
            total=Money(model.total),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
        # Lines are attached directly: the stored total stays authoritative
        order.items = [
            OrderItem(
                id=item.id,
                product_id=item.product_id,
                quantity=item.quantity,
                unit_price=Money(item.unit_price),
                product_name=item.product.name if item.product else None,
                product_image_url=item.product.image_url if item.product else None,
            )
            for item in model.items
        ]
        if include_owner and model.user is not None:
            order.user_name = model.user.name
            order.user_email = model.user.email
        return order
