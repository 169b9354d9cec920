"""
User Entity for the Accounts Domain
"""

from dataclasses import dataclass, field
from typing import Any

from storefront.core.domain import Email, Entity


@dataclass
class User(Entity[int]):
    """
    Registered user.

    password_hash is an opaque bcrypt hash. It never leaves the service:
    to_public_dict() is the only serialization offered.
    """

    name: str = ""
    email: str = ""
    password_hash: str = field(default="", repr=False)
    is_admin: bool = False

    def __post_init__(self):
        # Normalize through the value object (trim + lowercase)
        if self.email:
            self.email = Email(self.email).address

    def to_public_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "is_admin": self.is_admin,
            "created_at": self.created_at,
        }

    def promote_to_admin(self) -> None:
        self.is_admin = True
        self.touch()
