"""
Get All Orders Use Case
"""

import logging

from storefront.domains.ecommerce.application.ports import IOrderRepository
from storefront.domains.ecommerce.domain.entities.order import Order

logger = logging.getLogger(__name__)


class GetAllOrdersUseCase:
    """
    Use Case: Get All Orders

    Every order with its owner's name and email (None for guest orders).
    Callers must check for administrator access first.
    """

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self) -> list[Order]:
        orders = await self.order_repository.get_all()
        logger.debug(f"Listing {len(orders)} orders")
        return orders
