"""
Order management models
"""

from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product
    from .user import UserDB


class Order(Base, TimestampMixin):
    """Órdenes de compra"""

    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=True)  # null for guest checkout
    total = Column(Numeric(12, 2), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, completed, cancelled

    # Relationships
    user: Mapped["UserDB"] = relationship("UserDB")
    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="OrderItem.id",
    )

    __table_args__ = (
        Index("idx_orders_user", user_id),
        Index("idx_orders_status", status),
        Index("idx_orders_created_at", "created_at"),
    )

    def __repr__(self):
        return f"<Order(id={self.id}, status='{self.status}', total={self.total})>"


class OrderItem(Base):
    """Items individuales de una orden"""

    __tablename__ = "order_items"

    id = Column(Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)  # Precio al momento de la compra

    # Relationships
    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product"] = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity > 0", name="ck_order_items_quantity_positive"),
        Index("idx_order_items_order", order_id),
        Index("idx_order_items_product", product_id),
    )

    def __repr__(self):
        return f"<OrderItem(product_id={self.product_id}, quantity={self.quantity}, price={self.unit_price})>"
