"""
Product Entity for E-commerce Domain

Represents a catalog product with price, stock and soft-delete state.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from storefront.core.domain import Money, SoftDeletableEntity


@dataclass
class Product(SoftDeletableEntity[int]):
    """
    Product entity for the catalog.

    The price held here is authoritative: checkout always reads it from the
    store and never accepts one from the caller.
    """

    name: str = ""
    description: str | None = None
    price: Money = field(default_factory=Money.zero)
    stock: int = 0
    image_url: str | None = None

    def __post_init__(self):
        """Validate product after initialization."""
        if not self.name:
            raise ValueError("Product name is required")
        if self.stock < 0:
            raise ValueError("Product stock cannot be negative")

    def update_details(
        self,
        name: str,
        price: Money,
        stock: int,
        description: str | None = None,
        image_url: str | None = None,
    ) -> None:
        """Replace the editable fields of the product."""
        self.name = name
        self.price = price
        self.stock = stock
        self.description = description
        self.image_url = image_url
        self.touch()

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "price": self.price.amount,
            "stock": self.stock,
            "image_url": self.image_url,
            "deleted": self.deleted,
            "deleted_at": self.deleted_at,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }

    @classmethod
    def create(
        cls,
        name: str,
        price: Decimal,
        stock: int = 0,
        description: str | None = None,
        image_url: str | None = None,
    ) -> "Product":
        """Factory method for a new, not yet persisted product."""
        return cls(
            name=name,
            description=description,
            price=Money(price),
            stock=stock,
            image_url=image_url,
        )
