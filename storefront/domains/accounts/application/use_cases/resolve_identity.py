"""
Resolve Identity Use Case
"""

import logging

from storefront.core.domain import AuthenticationException
from storefront.domains.accounts.application.ports import IUserRepository
from storefront.services.token_service import TokenIdentity, TokenService

logger = logging.getLogger(__name__)


class ResolveIdentityUseCase:
    """
    Use Case: Resolve Identity

    Maps an access token to the stored user it names. The administrator
    flag comes from the user row, so promotions apply to tokens already issued.
    """

    def __init__(self, user_repository: IUserRepository, token_service: TokenService):
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, token: str) -> TokenIdentity:
        """
        Raises:
            AuthenticationException: Token invalid or its user no longer exists
        """
        claims = self.token_service.get_identity(token)

        user = await self.user_repository.get_by_id(claims.user_id)
        if user is None:
            logger.info(f"Token for unknown user {claims.user_id} rejected")
            raise AuthenticationException("User not found")

        return TokenIdentity(user_id=user.id, is_admin=user.is_admin)
