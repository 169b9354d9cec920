"""
Order Entity for E-commerce Domain

Represents an order with its line items and status.
"""

from dataclasses import dataclass, field
from typing import Any

from storefront.core.domain import AggregateRoot, Money, ValidationException

from ..value_objects.order_status import OrderStatus


@dataclass
class OrderItem:
    """
    Individual line in an order.

    unit_price is the product price captured when the order was placed.
    product_name and product_image_url are resolved from the catalog at read
    time and may reflect later edits to the product.
    """

    product_id: int
    quantity: int
    unit_price: Money
    id: int | None = None
    product_name: str | None = None
    product_image_url: str | None = None

    def __post_init__(self):
        if self.quantity < 1:
            raise ValidationException("Quantity must be at least 1", field="quantity")

    @property
    def subtotal(self) -> Money:
        """Calculate item subtotal."""
        return self.unit_price.multiply(self.quantity)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "id": self.id,
            "product_id": self.product_id,
            "product_name": self.product_name,
            "image_url": self.product_image_url,
            "quantity": self.quantity,
            "unit_price": self.unit_price.amount,
            "subtotal": self.subtotal.amount,
        }


@dataclass
class Order(AggregateRoot[int]):
    """
    Order aggregate root for e-commerce domain.

    The total is derived from the lines when they are added and is not
    recomputed afterwards, so later price edits never change it.

    Example:
        ```python
        order = Order(user_id=7)
        order.add_item(OrderItem(product_id=1, quantity=2, unit_price=Money(Decimal("10.00"))))
        order.total  # Money(amount=Decimal("20.00"))
        ```
    """

    user_id: int | None = None
    items: list[OrderItem] = field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    total: Money = field(default_factory=Money.zero)

    # Owner data, only filled for administrative listings
    user_name: str | None = None
    user_email: str | None = None

    # Item Management

    def add_item(self, item: OrderItem) -> None:
        """
        Append a line to the order.

        Lines for the same product are kept separate.
        """
        self.items.append(item)
        self.total = self.total.add(item.subtotal)
        self.touch()

    def quantities_by_product(self) -> dict[int, int]:
        totals: dict[int, int] = {}
        for item in self.items:
            totals[item.product_id] = totals.get(item.product_id, 0) + item.quantity
        return totals

    def to_detail_dict(self) -> dict[str, Any]:
        """Convert to detailed dictionary."""
        data = {
            "id": self.id,
            "user_id": self.user_id,
            "total": self.total.amount,
            "status": self.status.value,
            "items": [item.to_dict() for item in self.items],
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
        if self.user_name is not None or self.user_email is not None:
            data["user_name"] = self.user_name
            data["user_email"] = self.user_email
        return data

    @classmethod
    def create_for_user(cls, user_id: int | None) -> "Order":
        """Factory method for a new pending order, user_id None for guests."""
        return cls(user_id=user_id, status=OrderStatus.PENDING)
