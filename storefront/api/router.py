"""
API router aggregation.
"""

from fastapi import APIRouter

from storefront.domains.accounts.api.routes import router as accounts_router
from storefront.domains.ecommerce.api.routes import orders_router, products_router

api_router = APIRouter()

api_router.include_router(products_router)
api_router.include_router(orders_router)
api_router.include_router(accounts_router)
