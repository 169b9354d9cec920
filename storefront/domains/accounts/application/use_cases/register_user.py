"""
Register User Use Case
"""

import logging
from dataclasses import dataclass

from storefront.core.domain import DuplicateEntityException
from storefront.domains.accounts.application.ports import IPasswordHasher, IUserRepository
from storefront.domains.accounts.domain.entities.user import User

logger = logging.getLogger(__name__)


@dataclass
class RegisterUserRequest:
    """Validated registration fields."""

    name: str
    email: str
    password: str


class RegisterUserUseCase:
    """
    Use Case: Register User

    Registration never creates administrators.
    """

    def __init__(self, user_repository: IUserRepository, password_hasher: IPasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: RegisterUserRequest) -> User:
        """
        Create a user account.

        Raises:
            DuplicateEntityException: The normalized email is already registered
        """
        user = User(name=request.name.strip(), email=request.email, is_admin=False)

        if await self.user_repository.get_by_email(user.email) is not None:
            raise DuplicateEntityException("User", "email", user.email)

        user.password_hash = self.password_hasher.hash_password(request.password)
        # A concurrent registration can still trip the unique index here
        created = await self.user_repository.create(user)
        logger.info(f"User {created.id} registered")
        return created
