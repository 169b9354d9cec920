"""
Get User Orders Use Case
"""

import logging

from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities.order import Order

logger = logging.getLogger(__name__)


class GetUserOrdersUseCase:
    """
    Use Case: Get User Orders

    Order history of one user, newest first, lines joined with the
    current product name and image.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, user_id: int) -> list[Order]:
        orders = await self.order_repository.get_by_user(user_id)
        logger.debug(f"Found {len(orders)} orders for user {user_id}")
        return orders
