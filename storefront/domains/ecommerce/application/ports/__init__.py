"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing.
"""

from dataclasses import dataclass
from typing import Callable, Protocol, runtime_checkable

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.domains.accounts.application.ports import IUserRepository
from storefront.domains.ecommerce.domain.entities.order import Order
from storefront.domains.ecommerce.domain.entities.product import Product
from storefront.domains.ecommerce.domain.value_objects.order_status import OrderStatus


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interface for product repository.

    Defines the contract for product data access.
    """

    async def get_by_id(self, product_id: int) -> Product | None:
        """Get product by ID, soft-deleted or not"""
        ...

    async def list_active(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        """Non-deleted products, newest first"""
        ...

    async def count_active(self) -> int:
        """Count non-deleted products"""
        ...

    async def list_all(self, limit: int | None = None, offset: int = 0) -> list[Product]:
        """Every product, active ones first"""
        ...

    async def count_all(self) -> int:
        """Count every product"""
        ...

    async def create(self, product: Product) -> Product:
        """Persist a new product"""
        ...

    async def update(self, product: Product) -> Product | None:
        """Persist edits to an existing product"""
        ...

    async def soft_delete(self, product_id: int) -> Product | None:
        """Mark a product deleted"""
        ...

    async def restore(self, product_id: int) -> Product | None:
        """Clear the deleted mark of a product"""
        ...

    async def lock_for_checkout(self, product_ids: list[int]) -> dict[int, Product]:
        """Read and row-lock products for the running transaction"""
        ...

    async def decrement_stock(self, product_id: int, quantity: int) -> bool:
        """Take quantity out of stock unless it would go negative"""
        ...

    async def get_stock(self, product_id: int) -> int | None:
        """Current stock as seen by the running transaction"""
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def add(self, order: Order) -> Order:
        """Stage a new order and its lines in the running transaction"""
        ...

    async def get_by_id(self, order_id: int) -> Order | None:
        """Get order by ID with its lines"""
        ...

    async def get_by_user(self, user_id: int) -> list[Order]:
        """Get orders of a user, newest first"""
        ...

    async def get_all(self) -> list[Order]:
        """Get every order with owner data, newest first"""
        ...

    async def update_status(self, order_id: int, status: OrderStatus) -> bool:
        """Update order status, False when the order does not exist"""
        ...


@dataclass
class CheckoutRepositories:
    """Repositories bound to the session of one checkout attempt."""

    products: IProductRepository
    orders: IOrderRepository
    users: IUserRepository


CheckoutRepositoriesFactory = Callable[[AsyncSession], CheckoutRepositories]


__all__ = [
    "IProductRepository",
    "IOrderRepository",
    "CheckoutRepositories",
    "CheckoutRepositoriesFactory",
]
