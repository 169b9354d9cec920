"""
Authenticate User Use Case
"""

import logging
from dataclasses import dataclass

from storefront.core.domain import InvalidCredentialsException
from storefront.domains.accounts.application.ports import IUserRepository
from storefront.domains.accounts.domain.entities.user import User
from storefront.services.token_service import TokenService

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    user: User
    access_token: str
    token_type: str = "bearer"


class AuthenticateUserUseCase:
    """
    Use Case: Authenticate User

    An unknown email and a wrong password fail with the same error.
    """

    def __init__(self, user_repository: IUserRepository, token_service: TokenService):
        self.user_repository = user_repository
        self.token_service = token_service

    async def execute(self, email: str, password: str) -> LoginResult:
        user = await self.user_repository.get_by_email(email)
        if user is None or not self.token_service.verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise InvalidCredentialsException()

        token = self.token_service.create_user_token(user.id, user.is_admin)
        logger.info(f"User {user.id} logged in")
        return LoginResult(user=user, access_token=token)
