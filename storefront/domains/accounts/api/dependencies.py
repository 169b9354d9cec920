"""
Accounts API Dependencies

Identity gates resolving the caller from an ``Authorization: Bearer`` token.
"""

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.api.dependencies import get_container, get_db_session
from storefront.core.container import DependencyContainer
from storefront.core.domain import AuthenticationException, AuthorizationException
from storefront.domains.accounts.application.use_cases import AuthenticateUserUseCase, RegisterUserUseCase
from storefront.services.token_service import TokenIdentity

bearer_scheme = HTTPBearer(auto_error=False)


async def get_optional_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> TokenIdentity | None:
    """
    Caller identity when a token is sent, None otherwise.

    The token must name an existing user; a bad token or a missing user is
    rejected with 401.
    """
    if credentials is None:
        return None
    use_case = container.create_resolve_identity_use_case(session)
    return await use_case.execute(credentials.credentials)


def require_identity(identity: TokenIdentity | None = Depends(get_optional_identity)) -> TokenIdentity:
    if identity is None:
        raise AuthenticationException()
    return identity


def require_admin(identity: TokenIdentity = Depends(require_identity)) -> TokenIdentity:
    if not identity.is_admin:
        raise AuthorizationException("admin", user_id=identity.user_id)
    return identity


def get_register_user_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> RegisterUserUseCase:
    return container.create_register_user_use_case(session)


def get_authenticate_user_use_case(
    session: AsyncSession = Depends(get_db_session),
    container: DependencyContainer = Depends(get_container),
) -> AuthenticateUserUseCase:
    return container.create_authenticate_user_use_case(session)


__all__ = [
    "get_optional_identity",
    "require_identity",
    "require_admin",
    "get_register_user_use_case",
    "get_authenticate_user_use_case",
]
