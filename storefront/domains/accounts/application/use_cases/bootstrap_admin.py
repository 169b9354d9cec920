"""
Bootstrap Admin Use Case

Startup seeding of the administrator account named by the settings.
"""

import logging

from storefront.domains.accounts.application.ports import IPasswordHasher, IUserRepository
from storefront.domains.accounts.domain.entities.user import User

logger = logging.getLogger(__name__)


class BootstrapAdminUseCase:
    """Create the administrator, or promote the existing user with that email."""

    def __init__(self, user_repository: IUserRepository, password_hasher: IPasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, email: str, password: str, name: str) -> User:
        existing = await self.user_repository.get_by_email(email)
        if existing is not None:
            if existing.is_admin:
                return existing
            existing.promote_to_admin()
            logger.info(f"User {existing.id} promoted to administrator")
            return await self.user_repository.save(existing)

        admin = User(
            name=name,
            email=email,
            password_hash=self.password_hasher.hash_password(password),
            is_admin=True,
        )
        created = await self.user_repository.create(admin)
        logger.info(f"Administrator account created with id {created.id}")
        return created
