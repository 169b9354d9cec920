"""
E-commerce API Dependencies

FastAPI dependencies for the e-commerce domain.
"""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.dependencies import get_container, get_db_session
from storefront.core.container import DependencyContainer
from storefront.domains.ecommerce.application.use_cases import (
    CreateOrderUseCase,
    CreateProductUseCase,
    DeleteProductUseCase,
    GetAllOrdersUseCase,
    GetProductUseCase,
    GetUserOrdersUseCase,
    ListProductsUseCase,
    RestoreProductUseCase,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)


def get_list_products_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> ListProductsUseCase:
    """Get ListProductsUseCase instance."""
    return container.create_list_products_use_case(session)


def get_product_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> GetProductUseCase:
    """Get GetProductUseCase instance."""
    return container.create_get_product_use_case(session)


def get_create_product_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> CreateProductUseCase:
    return container.create_create_product_use_case(session)


def get_update_product_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> UpdateProductUseCase:
    return container.create_update_product_use_case(session)


def get_delete_product_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> DeleteProductUseCase:
    return container.create_delete_product_use_case(session)


def get_restore_product_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> RestoreProductUseCase:
    return container.create_restore_product_use_case(session)


def get_create_order_use_case(container: DependencyContainer = Depends(get_container)) -> CreateOrderUseCase:
    """Checkout manages its own transactions."""
    return container.create_create_order_use_case()


def get_user_orders_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> GetUserOrdersUseCase:
    return container.create_get_user_orders_use_case(session)


def get_all_orders_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> GetAllOrdersUseCase:
    return container.create_get_all_orders_use_case(session)


def get_update_order_status_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> UpdateOrderStatusUseCase:
    return container.create_update_order_status_use_case(session)


__all__ = [
    "get_list_products_use_case",
    "get_product_use_case",
    "get_create_product_use_case",
    "get_update_product_use_case",
    "get_delete_product_use_case",
    "get_restore_product_use_case",
    "get_create_order_use_case",
    "get_user_orders_use_case",
    "get_all_orders_use_case",
    "get_update_order_status_use_case",
]
