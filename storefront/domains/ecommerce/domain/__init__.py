from .entities.order import Order, OrderItem
from .entities.product import Product
from .value_objects.order_status import OrderStatus

__all__ = [
    "Order",
    "OrderItem",
    "Product",
    "OrderStatus",
]
