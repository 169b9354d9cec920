"""
E-commerce API Routes

FastAPI routers for products and orders.
"""

import logging

from fastapi import APIRouter, Depends, Query, Response, status

from storefront.api.dependencies import get_app_settings
from storefront.api.schemas import MAX_DB_INT, PathId
from storefront.config.settings import Settings
from storefront.core.domain import AuthorizationException
from storefront.domains.accounts.api.dependencies import get_optional_identity, require_admin, require_identity
from storefront.domains.ecommerce.api.dependencies import (
    get_all_orders_use_case,
    get_create_order_use_case,
    get_create_product_use_case,
    get_delete_product_use_case,
    get_list_products_use_case,
    get_product_use_case,
    get_restore_product_use_case,
    get_update_order_status_use_case,
    get_update_product_use_case,
    get_user_orders_use_case,
)
from storefront.domains.ecommerce.api.schemas import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderListResponse,
    OrderResponse,
    PaginatedProductsResponse,
    ProductRequest,
    ProductResponse,
    RestoreProductResponse,
    UpdateOrderStatusRequest,
    UpdateOrderStatusResponse,
)
from storefront.domains.ecommerce.application.dto import OrderItemInput, PageRequest, PaginatedResult, ProductData
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
from storefront.domains.ecommerce.application.use_cases import CreateOrderRequest as CheckoutRequest
from storefront.domains.ecommerce.domain.entities.order import Order
from storefront.domains.ecommerce.domain.entities.product import Product
from storefront.services.token_service import TokenIdentity

logger = logging.getLogger(__name__)

products_router = APIRouter(prefix="/products", tags=["Products"])
orders_router = APIRouter(prefix="/orders", tags=["Orders"])


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse.model_validate(product.to_dict())


def _order_response(order: Order) -> OrderResponse:
    return OrderResponse.model_validate(order.to_detail_dict())


def _page_response(result: PaginatedResult[Product]) -> PaginatedProductsResponse:
    return PaginatedProductsResponse(
        items=[_product_response(p) for p in result.items],
        page=result.page,
        limit=result.limit,
        total=result.total,
        total_pages=result.total_pages,
        has_next=result.has_next,
        has_prev=result.has_prev,
    )


async def _list_products(
    use_case: ListProductsUseCase,
    settings: Settings,
    page: int | None,
    limit: int | None,
    include_deleted: bool,
) -> list[ProductResponse] | PaginatedProductsResponse:
    # Plain list unless the caller asks for a page
    if page is None and limit is None:
        products = await use_case.execute(include_deleted=include_deleted)
        return [_product_response(p) for p in products]

    page_request = PageRequest(page=page or 1, limit=limit or settings.PRODUCTS_PAGE_SIZE)
    result = await use_case.execute_paginated(page_request, include_deleted=include_deleted)
    return _page_response(result)


# ============================================================
# PRODUCTS
# ============================================================


@products_router.get("", response_model=list[ProductResponse] | PaginatedProductsResponse)
async def list_products(
    page: int | None = Query(default=None, ge=1, le=MAX_DB_INT),
    limit: int | None = Query(default=None, ge=1, le=100),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
    settings: Settings = Depends(get_app_settings),
):
    """Active products, newest first."""
    return await _list_products(use_case, settings, page, limit, include_deleted=False)


@products_router.get("/admin/all", response_model=list[ProductResponse] | PaginatedProductsResponse)
async def list_all_products(
    page: int | None = Query(default=None, ge=1, le=MAX_DB_INT),
    limit: int | None = Query(default=None, ge=1, le=100),
    _: TokenIdentity = Depends(require_admin),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
    settings: Settings = Depends(get_app_settings),
):
    """Every product including soft-deleted ones, active first."""
    return await _list_products(use_case, settings, page, limit, include_deleted=True)


@products_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: PathId,
    use_case: GetProductUseCase = Depends(get_product_use_case),
):
    """Get product by ID."""
    return _product_response(await use_case.execute(product_id))


@products_router.post("", response_model=ProductResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    body: ProductRequest,
    _: TokenIdentity = Depends(require_admin),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
):
    product = await use_case.execute(ProductData(**body.model_dump()))
    return _product_response(product)


@products_router.put("/{product_id}", response_model=ProductResponse)
async def update_product(
    product_id: PathId,
    body: ProductRequest,
    _: TokenIdentity = Depends(require_admin),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
):
    product = await use_case.execute(product_id, ProductData(**body.model_dump()))
    return _product_response(product)


@products_router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: PathId,
    _: TokenIdentity = Depends(require_admin),
    use_case: DeleteProductUseCase = Depends(get_delete_product_use_case),
):
    """Soft delete: the product disappears from the public listing."""
    await use_case.execute(product_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@products_router.put("/{product_id}/restore", response_model=RestoreProductResponse)
async def restore_product(
    product_id: PathId,
    _: TokenIdentity = Depends(require_admin),
    use_case: RestoreProductUseCase = Depends(get_restore_product_use_case),
):
    await use_case.execute(product_id)
    return RestoreProductResponse(message="Product restored successfully")


# ============================================================
# ORDERS
# ============================================================


@orders_router.post("", response_model=CreateOrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    body: CreateOrderRequest,
    identity: TokenIdentity | None = Depends(get_optional_identity),
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """
    Checkout.

    With a token the order belongs to the caller and a different userId in
    the body is refused. Without a token, a body userId must name an
    existing user; no userId means a guest order.
    """
    if identity is not None:
        if body.user_id is not None and body.user_id != identity.user_id:
            raise AuthorizationException("create_order", resource=f"user {body.user_id}", user_id=identity.user_id)
        owner_id, verified = identity.user_id, True
    else:
        owner_id, verified = body.user_id, False

    order = await use_case.execute(
        CheckoutRequest(
            items=[OrderItemInput(product_id=i.product_id, quantity=i.quantity) for i in body.items],
            user_id=owner_id,
            user_verified=verified,
        )
    )
    return CreateOrderResponse(message="Order created successfully", order=_order_response(order))


@orders_router.get("/admin/all", response_model=OrderListResponse)
async def list_all_orders(
    _: TokenIdentity = Depends(require_admin),
    use_case: GetAllOrdersUseCase = Depends(get_all_orders_use_case),
):
    orders = await use_case.execute()
    return OrderListResponse(orders=[_order_response(o) for o in orders])


@orders_router.get("/user/{user_id}", response_model=OrderListResponse)
async def list_user_orders(
    user_id: PathId,
    identity: TokenIdentity = Depends(require_identity),
    use_case: GetUserOrdersUseCase = Depends(get_user_orders_use_case),
):
    """Order history of the calling user."""
    if identity.user_id != user_id:
        raise AuthorizationException("list_orders", resource=f"user {user_id}", user_id=identity.user_id)
    orders = await use_case.execute(user_id)
    return OrderListResponse(orders=[_order_response(o) for o in orders])


@orders_router.put("/{order_id}/status", response_model=UpdateOrderStatusResponse)
async def update_order_status(
    order_id: PathId,
    body: UpdateOrderStatusRequest,
    _: TokenIdentity = Depends(require_admin),
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    order = await use_case.execute(order_id, body.status)
    return UpdateOrderStatusResponse(order=_order_response(order))
