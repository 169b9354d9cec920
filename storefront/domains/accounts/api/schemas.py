"""
Accounts API Schemas
"""

from datetime import datetime
from typing import Annotated

from pydantic import EmailStr, Field, StringConstraints

from storefront.api.schemas import CamelModel

UserName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=3, max_length=255)]


class RegisterRequest(CamelModel):
    """Registration body."""

    name: UserName
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=128)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1, max_length=128)


class UserResponse(CamelModel):
    """Public view of a user. The password hash is never part of it."""

    id: int
    name: str
    email: str
    is_admin: bool
    created_at: datetime | None = None


class RegisterResponse(CamelModel):
    success: bool = True
    message: str
    user: UserResponse


class LoginResponse(CamelModel):
    success: bool = True
    message: str
    user: UserResponse
    access_token: str
    token_type: str = "bearer"
