"""
List Products Use Case

Catalog listings, plain or paginated.
"""

import logging

from storefront.domains.ecommerce.application.dto import PageRequest, PaginatedResult
from storefront.domains.ecommerce.application.ports import IProductRepository
from storefront.domains.ecommerce.domain.entities.product import Product

logger = logging.getLogger(__name__)


class ListProductsUseCase:
    """
    Use Case: List Products

    - include_deleted=False: active products only, newest first
    - include_deleted=True: every product, active first then newest first
      (administrators only, checked by the caller)
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, include_deleted: bool = False) -> list[Product]:
        if include_deleted:
            return await self.product_repository.list_all()
        return await self.product_repository.list_active()

    async def execute_paginated(self, page: PageRequest, include_deleted: bool = False) -> PaginatedResult[Product]:
        """
        Return one page of the listing.

        A page past the end is returned empty with the real totals.
        """
        if include_deleted:
            items = await self.product_repository.list_all(limit=page.limit, offset=page.offset)
            total = await self.product_repository.count_all()
        else:
            items = await self.product_repository.list_active(limit=page.limit, offset=page.offset)
            total = await self.product_repository.count_active()

        logger.debug(f"Products page {page.page} (limit {page.limit}): {len(items)} of {total}")
        return PaginatedResult(items=items, page=page.page, limit=page.limit, total=total)
