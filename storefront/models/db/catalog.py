"""
Catalog models
"""

from sqlalchemy import Boolean, CheckConstraint, Column, DateTime, Index, Integer, Numeric, String, Text

from .base import Base, TimestampMixin


class Product(Base, TimestampMixin):
    """Productos del catálogo. Nunca se borran físicamente."""

    __tablename__ = "products"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    description = Column(Text)
    price = Column(Numeric(10, 2), nullable=False)
    stock = Column(Integer, nullable=False, default=0)
    image_url = Column(String(500))

    # Soft delete
    deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True))

    __table_args__ = (
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        Index("idx_products_deleted", deleted),
    )

    def __repr__(self):
        return f"<Product(id={self.id}, name='{self.name}', price={self.price}, stock={self.stock})>"
