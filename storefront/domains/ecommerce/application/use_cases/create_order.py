"""
Create Order Use Case

Checkout: validates a cart against live stock, prices it from the catalog
and commits the order, its lines and the stock decrement as one unit.
"""

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import (
    InsufficientStockException,
    ProductNotFoundException,
    UserNotFoundException,
    ValidationException,
)
from storefront.database import Database, run_in_transaction
from storefront.domains.ecommerce.application.dto import OrderItemInput
from storefront.domains.ecommerce.application.ports import CheckoutRepositoriesFactory
from storefront.domains.ecommerce.domain.entities.order import Order, OrderItem

logger = logging.getLogger(__name__)


@dataclass
class CreateOrderRequest:
    """
    Request for creating an order.

    user_id is the owning user, None for a guest checkout. When
    user_verified is False the user is looked up before the order is placed.
    """

    items: list[OrderItemInput]
    user_id: int | None = None
    user_verified: bool = False


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Responsibilities:
    - Lock the referenced products in ascending id order
    - Reject unknown or soft-deleted products
    - Check each line against the stock left by the lines before it
    - Price lines from the catalog and decrement stock with a guarded update
    - Restart the whole attempt on transient transaction failures
    """

    def __init__(
        self,
        database: Database,
        repositories: CheckoutRepositoriesFactory,
        max_attempts: int = 3,
        retry_backoff: float = 0.05,
    ):
        """
        Initialize use case with dependencies.

        Args:
            database: Store handle, one session is opened per attempt
            repositories: Builds the repositories bound to an attempt's session
            max_attempts: Attempts before a transient failure is reported
            retry_backoff: Linear backoff between attempts, in seconds
        """
        self.database = database
        self.repositories = repositories
        self.max_attempts = max_attempts
        self.retry_backoff = retry_backoff

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Place an order.

        Returns:
            The persisted order with ids, total and pending status

        Raises:
            ValidationException: Empty cart or non-positive quantity
            UserNotFoundException: Unverified user_id does not exist
            ProductNotFoundException: A line references a missing or deleted product
            InsufficientStockException: A line exceeds the stock left for its product
            PersistenceException: The store failed on every attempt
        """
        self._validate_request(request)

        async def checkout(session: AsyncSession) -> Order:
            return await self._checkout(session, request)

        order = await run_in_transaction(
            self.database,
            checkout,
            operation="create_order",
            max_attempts=self.max_attempts,
            backoff=self.retry_backoff,
        )
        logger.info(
            f"Order {order.id} created for {'user ' + str(order.user_id) if order.user_id else 'guest'}: "
            f"{len(order.items)} line(s), total {order.total}"
        )
        return order

    def _validate_request(self, request: CreateOrderRequest) -> None:
        if not request.items:
            raise ValidationException("Order must contain at least one item", field="items")
        for item in request.items:
            if item.quantity < 1:
                raise ValidationException(
                    f"Quantity for product {item.product_id} must be at least 1",
                    field="quantity",
                )

    async def _checkout(self, session: AsyncSession, request: CreateOrderRequest) -> Order:
        repos = self.repositories(session)

        if request.user_id is not None and not request.user_verified:
            if not await repos.users.exists(request.user_id):
                raise UserNotFoundException(request.user_id)

        # Lock order: ascending product id
        product_ids = sorted({item.product_id for item in request.items})
        products = await repos.products.lock_for_checkout(product_ids)

        for item in request.items:
            product = products.get(item.product_id)
            if product is None or product.is_deleted():
                raise ProductNotFoundException(item.product_id)

        remaining = {product_id: product.stock for product_id, product in products.items()}
        order = Order.create_for_user(request.user_id)

        for item in request.items:
            product = products[item.product_id]
            available = remaining[item.product_id]
            if item.quantity > available:
                raise InsufficientStockException(item.product_id, item.quantity, available)
            remaining[item.product_id] = available - item.quantity
            order.add_item(
                OrderItem(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    unit_price=product.price,
                    product_name=product.name,
                    product_image_url=product.image_url,
                )
            )

        for product_id, quantity in order.quantities_by_product().items():
            if not await repos.products.decrement_stock(product_id, quantity):
                current = await repos.products.get_stock(product_id)
                raise InsufficientStockException(product_id, quantity, current or 0)

        return await repos.orders.add(order)
