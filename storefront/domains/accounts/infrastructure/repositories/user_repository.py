"""
User Repository Implementation

SQLAlchemy implementation of IUserRepository.
"""

import logging
from datetime import UTC, datetime

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from storefront.core.domain import DuplicateEntityException
from storefront.domains.accounts.application.ports import IUserRepository
from storefront.domains.accounts.domain.entities.user import User
from storefront.models.db.user import UserDB

logger = logging.getLogger(__name__)


class SQLAlchemyUserRepository(IUserRepository):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> User | None:
        model = await self.session.get(UserDB, user_id)
        return self._to_entity(model) if model else None

    async def get_by_email(self, email: str) -> User | None:
        result = await self.session.execute(select(UserDB).where(UserDB.email == email.strip().lower()))
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def exists(self, user_id: int) -> bool:
        result = await self.session.execute(select(func.count(UserDB.id)).where(UserDB.id == user_id))
        return result.scalar_one() > 0

    async def create(self, user: User) -> User:
        """
        Insert a new user.

        Raises:
            DuplicateEntityException: The unique email index rejected the row
        """
        model = UserDB(
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            is_admin=user.is_admin,
        )
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.info(f"Duplicate email on user insert: {user.email}")
            raise DuplicateEntityException("User", "email", user.email) from e
        return self._to_entity(model)

    async def save(self, user: User) -> User:
        model = await self.session.get(UserDB, user.id)
        if model is None:
            return await self.create(user)
        model.name = user.name
        model.password_hash = user.password_hash
        model.is_admin = user.is_admin
        model.updated_at = datetime.now(UTC)
        await self.session.commit()
        return self._to_entity(model)

    def _to_entity(self, model: UserDB) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            is_admin=bool(model.is_admin),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
