"""
Dependency Injection Container

Wires the SQLAlchemy repositories and the token service into the use cases.
One container is built per application in the lifespan and kept on app.state.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from storefront.config.settings import Settings
from storefront.database import Database
from storefront.domains.accounts.application.use_cases import (
    AuthenticateUserUseCase,
    BootstrapAdminUseCase,
    RegisterUserUseCase,
    ResolveIdentityUseCase,
)
from storefront.domains.accounts.infrastructure.repositories import SQLAlchemyUserRepository
from storefront.domains.ecommerce.application.ports import CheckoutRepositories
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
from storefront.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)
from storefront.services.token_service import TokenService

logger = logging.getLogger(__name__)


def checkout_repositories(session: AsyncSession) -> CheckoutRepositories:
    """Repositories sharing the session of one checkout attempt."""
    return CheckoutRepositories(
        products=SQLAlchemyProductRepository(session),
        orders=SQLAlchemyOrderRepository(session),
        users=SQLAlchemyUserRepository(session),
    )


class DependencyContainer:
    """
    Dependency Injection Container.

    Use cases that run inside a request take the request's session;
    checkout opens its own sessions so it can retry.
    """

    def __init__(self, settings: Settings, database: Database):
        self.settings = settings
        self.database = database
        self.token_service = TokenService(settings)

    # ============================================================
    # E-COMMERCE: CATALOG
    # ============================================================

    def create_list_products_use_case(self, session: AsyncSession) -> ListProductsUseCase:
        return ListProductsUseCase(SQLAlchemyProductRepository(session))

    def create_get_product_use_case(self, session: AsyncSession) -> GetProductUseCase:
        return GetProductUseCase(SQLAlchemyProductRepository(session))

    def create_create_product_use_case(self, session: AsyncSession) -> CreateProductUseCase:
        return CreateProductUseCase(SQLAlchemyProductRepository(session))

    def create_update_product_use_case(self, session: AsyncSession) -> UpdateProductUseCase:
        return UpdateProductUseCase(SQLAlchemyProductRepository(session))

    def create_delete_product_use_case(self, session: AsyncSession) -> DeleteProductUseCase:
        return DeleteProductUseCase(SQLAlchemyProductRepository(session))

    def create_restore_product_use_case(self, session: AsyncSession) -> RestoreProductUseCase:
        return RestoreProductUseCase(SQLAlchemyProductRepository(session))

    # ============================================================
    # E-COMMERCE: ORDERS
    # ============================================================

    def create_create_order_use_case(self) -> CreateOrderUseCase:
        return CreateOrderUseCase(
            database=self.database,
            repositories=checkout_repositories,
            max_attempts=self.settings.CHECKOUT_MAX_ATTEMPTS,
            retry_backoff=self.settings.CHECKOUT_RETRY_BACKOFF,
        )

    def create_get_user_orders_use_case(self, session: AsyncSession) -> GetUserOrdersUseCase:
        return GetUserOrdersUseCase(SQLAlchemyOrderRepository(session))

    def create_get_all_orders_use_case(self, session: AsyncSession) -> GetAllOrdersUseCase:
        return GetAllOrdersUseCase(SQLAlchemyOrderRepository(session))

    def create_update_order_status_use_case(self, session: AsyncSession) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(SQLAlchemyOrderRepository(session))

    # ============================================================
    # ACCOUNTS
    # ============================================================

    def create_register_user_use_case(self, session: AsyncSession) -> RegisterUserUseCase:
        return RegisterUserUseCase(SQLAlchemyUserRepository(session), self.token_service)

    def create_authenticate_user_use_case(self, session: AsyncSession) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(SQLAlchemyUserRepository(session), self.token_service)

    def create_resolve_identity_use_case(self, session: AsyncSession) -> ResolveIdentityUseCase:
        return ResolveIdentityUseCase(SQLAlchemyUserRepository(session), self.token_service)

    def create_bootstrap_admin_use_case(self, session: AsyncSession) -> BootstrapAdminUseCase:
        return BootstrapAdminUseCase(SQLAlchemyUserRepository(session), self.token_service)
