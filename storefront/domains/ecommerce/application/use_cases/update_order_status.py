"""
Update Order Status Use Case
"""

import logging
from typing import Any

from storefront.core.domain import OrderNotFoundException
from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities.order import Order
from storefront.domains.ecommerce.domain.value_objects.order_status import OrderStatus

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase:
    """
    Use Case: Update Order Status

    Sets the status of an order. Only the status and updated_at change.
    """

    def __init__(self, order_repository: IOrderRepository):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order data access
        """
        self.order_repository = order_repository

    async def execute(self, order_id: int, status: Any) -> Order:
        """
        Change the status of an order.

        Args:
            order_id: Order to update
            status: Raw status value, one of pending, completed, cancelled

        Returns:
            The updated order with its lines

        Raises:
            InvalidStatusException: Unknown status, nothing is written
            OrderNotFoundException: No order with this id
        """
        new_status = OrderStatus.parse(status)

        if not await self.order_repository.update_status(order_id, new_status):
            raise OrderNotFoundException(order_id)

        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundException(order_id)

        logger.info(f"Order {order_id} status set to {new_status.value}")
        return order
