"""
E-commerce API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from urllib.parse import urlparse

from pydantic import Field, StringConstraints, field_validator

from storefront.api.schemas import MAX_DB_INT, CamelModel

ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]


# ==================== Products ====================


class ProductRequest(CamelModel):
    """Product fields accepted on create and update."""

    name: ProductName
    description: str | None = Field(default=None, max_length=5000)
    price: Decimal = Field(..., ge=Decimal("0.01"), max_digits=10, decimal_places=2)
    stock: int = Field(..., ge=0, le=MAX_DB_INT)
    image_url: str | None = Field(default=None, max_length=500)

    @field_validator("description")
    @classmethod
    def validate_description(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        if len(value) < 10:
            raise ValueError("Description must be at least 10 characters long")
        return value

    @field_validator("image_url")
    @classmethod
    def validate_image_url(cls, value: str | None) -> str | None:
        """Absolute http(s) URL or a relative path."""
        if value is None:
            return None
        value = value.strip()
        if not value:
            return None
        parsed = urlparse(value)
        if parsed.scheme:
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise ValueError("Image URL must be an http(s) URL or a relative path")
        return value


class ProductResponse(CamelModel):
    """Product response schema."""

    id: int
    name: str
    description: str | None = None
    price: Decimal
    stock: int
    image_url: str | None = None
    deleted: bool = False
    deleted_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class PaginatedProductsResponse(CamelModel):
    items: list[ProductResponse]
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


class RestoreProductResponse(CamelModel):
    success: bool = True
    message: str


# ==================== Orders ====================


class OrderItemRequest(CamelModel):
    """One cart line."""

    product_id: int = Field(..., ge=1, le=MAX_DB_INT)
    quantity: int = Field(..., ge=1, le=MAX_DB_INT)


class CreateOrderRequest(CamelModel):
    """Checkout body. Prices are never accepted from the caller."""

    items: list[OrderItemRequest] = Field(..., min_length=1)
    user_id: int | None = Field(default=None, ge=1, le=MAX_DB_INT)


class OrderItemResponse(CamelModel):
    id: int | None = None
    product_id: int
    product_name: str | None = None
    image_url: str | None = None
    quantity: int
    unit_price: Decimal
    subtotal: Decimal


class OrderResponse(CamelModel):
    """Order with its lines; owner fields only appear in administrative listings."""

    id: int
    user_id: int | None = None
    total: Decimal
    status: str
    items: list[OrderItemResponse]
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user_name: str | None = None
    user_email: str | None = None


class CreateOrderResponse(CamelModel):
    success: bool = True
    message: str
    order: OrderResponse


class OrderListResponse(CamelModel):
    success: bool = True
    orders: list[OrderResponse]


class UpdateOrderStatusRequest(CamelModel):
    # Checked against the known statuses by the use case
    status: str


class UpdateOrderStatusResponse(CamelModel):
    success: bool = True
    order: OrderResponse
