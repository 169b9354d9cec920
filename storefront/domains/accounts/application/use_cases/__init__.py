"""
Accounts Use Cases
"""

from .authenticate_user import AuthenticateUserUseCase, LoginResult
from .bootstrap_admin import BootstrapAdminUseCase
from .register_user import RegisterUserRequest, RegisterUserUseCase
from .resolve_identity import ResolveIdentityUseCase

__all__ = [
    "AuthenticateUserUseCase",
    "LoginResult",
    "BootstrapAdminUseCase",
    "RegisterUserRequest",
    "RegisterUserUseCase",
    "ResolveIdentityUseCase",
]
