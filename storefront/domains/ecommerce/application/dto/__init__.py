"""
Ecommerce Application DTOs

Data Transfer Objects for the Ecommerce domain.
"""

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Generic, TypeVar

T = TypeVar("T")


# ==================== Product DTOs ====================


@dataclass
class ProductData:
    """Validated product fields, as accepted for create and update"""

    name: str
    price: Decimal
    stock: int
    description: str | None = None
    image_url: str | None = None


@dataclass
class PageRequest:
    """Requested page of a listing"""

    page: int = 1
    limit: int = 12

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


@dataclass
class PaginatedResult(Generic[T]):
    """One page of a listing with its navigation data"""

    items: list[T]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit) if self.limit else 0

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_prev(self) -> bool:
        return self.page > 1


# ==================== Order DTOs ====================


@dataclass
class OrderItemInput:
    """One cart line as submitted by the caller"""

    product_id: int
    quantity: int


__all__ = [
    "ProductData",
    "PageRequest",
    "PaginatedResult",
    "OrderItemInput",
]
