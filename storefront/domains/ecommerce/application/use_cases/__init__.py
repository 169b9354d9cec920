"""
E-commerce Use Cases

Business use cases for the e-commerce domain.
Each use case represents a single business operation.
"""

from .create_order import CreateOrderRequest, CreateOrderUseCase
from .get_all_orders import GetAllOrdersUseCase
from .get_product import GetProductUseCase
from .get_user_orders import GetUserOrdersUseCase
from .list_products import ListProductsUseCase
from .manage_products import (
    CreateProductUseCase,
    DeleteProductUseCase,
    RestoreProductUseCase,
    UpdateProductUseCase,
)
from .update_order_status import UpdateOrderStatusUseCase

__all__ = [
    # Checkout
    "CreateOrderUseCase",
    "CreateOrderRequest",
    # Order queries and status
    "GetUserOrdersUseCase",
    "GetAllOrdersUseCase",
    "UpdateOrderStatusUseCase",
    # Catalog
    "ListProductsUseCase",
    "GetProductUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeleteProductUseCase",
    "RestoreProductUseCase",
]
