"""
Accounts Application Ports

Interface definitions (ports) for the Accounts domain.
"""

from typing import Protocol, runtime_checkable

from storefront.domains.accounts.domain.entities.user import User


@runtime_checkable
class IUserRepository(Protocol):
    """
    Interface for user repository.

    Defines the contract for user data access.
    """

    async def get_by_id(self, user_id: int) -> User | None:
        """Get user by ID"""
        ...

    async def get_by_email(self, email: str) -> User | None:
        """Get user by normalized email"""
        ...

    async def exists(self, user_id: int) -> bool:
        """Check whether a user with this ID exists"""
        ...

    async def create(self, user: User) -> User:
        """Persist a new user, DuplicateEntityException on a taken email"""
        ...

    async def save(self, user: User) -> User:
        """Persist changes to an existing user"""
        ...


@runtime_checkable
class IPasswordHasher(Protocol):
    """Hashes and verifies passwords."""

    def hash_password(self, password: str) -> str: ...

    def verify_password(self, plain_password: str, hashed_password: str) -> bool: ...


__all__ = ["IUserRepository", "IPasswordHasher"]
