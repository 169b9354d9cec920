"""
Unit Tests for Accounts Use Cases
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront.core.domain import AuthenticationException, DuplicateEntityException, InvalidCredentialsException
from storefront.domains.accounts.application.use_cases import (
    AuthenticateUserUseCase,
    BootstrapAdminUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
    ResolveIdentityUseCase,
)
from storefront.domains.accounts.domain.entities.user import User
from storefront.services.token_service import TokenIdentity


@pytest.fixture
def mock_user_repository():
    mock_repo = AsyncMock()
    mock_repo.get_by_email.return_value = None

    async def create(user):
        user.id = 11
        return user

    mock_repo.create.side_effect = create
    mock_repo.save.side_effect = lambda user: user
    return mock_repo


@pytest.fixture
def mock_token_service():
    service = MagicMock()
    service.hash_password.side_effect = lambda password: f"hashed:{password}"
    service.verify_password.side_effect = lambda password, hashed: hashed == f"hashed:{password}"
    service.create_user_token.return_value = "signed-token"
    return service


class TestRegisterUserUseCase:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_register_normalizes_email_and_hashes(self, mock_user_repository, mock_token_service):
        # Arrange
        use_case = RegisterUserUseCase(mock_user_repository, mock_token_service)

        # Act
        user = await use_case.execute(RegisterUserRequest(name="  Jane Buyer ", email="Jane@Shop.IO", password="secret1"))

        # Assert
        assert user.id == 11
        assert user.name == "Jane Buyer"
        assert user.email == "jane@shop.io"
        assert user.password_hash == "hashed:secret1"
        assert user.is_admin is False
        mock_user_repository.get_by_email.assert_awaited_once_with("jane@shop.io")

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_duplicate_email(self, mock_user_repository, mock_token_service):
        mock_user_repository.get_by_email.return_value = User(id=1, name="Jane", email="jane@shop.io")
        use_case = RegisterUserUseCase(mock_user_repository, mock_token_service)

        with pytest.raises(DuplicateEntityException):
            await use_case.execute(RegisterUserRequest(name="Jane Again", email="JANE@shop.io", password="secret1"))

        mock_user_repository.create.assert_not_awaited()


class TestAuthenticateUserUseCase:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_login_returns_token(self, mock_user_repository, mock_token_service):
        mock_user_repository.get_by_email.return_value = User(
            id=4, name="Jane", email="jane@shop.io", password_hash="hashed:secret1"
        )
        use_case = AuthenticateUserUseCase(mock_user_repository, mock_token_service)

        result = await use_case.execute("jane@shop.io", "secret1")

        assert result.access_token == "signed-token"
        assert result.token_type == "bearer"
        mock_token_service.create_user_token.assert_called_once_with(4, False)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_fail_alike(self, mock_user_repository, mock_token_service):
        use_case = AuthenticateUserUseCase(mock_user_repository, mock_token_service)

        with pytest.raises(InvalidCredentialsException) as unknown:
            await use_case.execute("nobody@shop.io", "secret1")

        mock_user_repository.get_by_email.return_value = User(
            id=4, name="Jane", email="jane@shop.io", password_hash="hashed:secret1"
        )
        with pytest.raises(InvalidCredentialsException) as wrong:
            await use_case.execute("jane@shop.io", "not-the-password")

        assert unknown.value.to_dict() == wrong.value.to_dict()


class TestBootstrapAdminUseCase:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_creates_admin(self, mock_user_repository, mock_token_service):
        use_case = BootstrapAdminUseCase(mock_user_repository, mock_token_service)

        admin = await use_case.execute("admin@storefront.io", "admin-secret", "Store Admin")

        assert admin.is_admin
        assert admin.password_hash == "hashed:admin-secret"

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_promotes_existing_user(self, mock_user_repository, mock_token_service):
        existing = User(id=2, name="Owner", email="admin@storefront.io", password_hash="hashed:old")
        mock_user_repository.get_by_email.return_value = existing
        use_case = BootstrapAdminUseCase(mock_user_repository, mock_token_service)

        admin = await use_case.execute("admin@storefront.io", "admin-secret", "Store Admin")

        assert admin.is_admin
        assert admin.password_hash == "hashed:old"
        mock_user_repository.save.assert_awaited_once()
        mock_user_repository.create.assert_not_awaited()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_existing_admin_untouched(self, mock_user_repository, mock_token_service):
        mock_user_repository.get_by_email.return_value = User(id=2, name="Owner", email="admin@storefront.io", is_admin=True)
        use_case = BootstrapAdminUseCase(mock_user_repository, mock_token_service)

        await use_case.execute("admin@storefront.io", "admin-secret", "Store Admin")

        mock_user_repository.save.assert_not_awaited()
        mock_user_repository.create.assert_not_awaited()


class TestResolveIdentityUseCase:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_admin_flag_comes_from_stored_user(self, mock_user_repository, mock_token_service):
        mock_token_service.get_identity.return_value = TokenIdentity(user_id=4, is_admin=True)
        mock_user_repository.get_by_id.return_value = User(id=4, name="Jane", email="jane@shop.io", is_admin=False)
        use_case = ResolveIdentityUseCase(mock_user_repository, mock_token_service)

        identity = await use_case.execute("signed-token")

        assert identity == TokenIdentity(user_id=4, is_admin=False)
        mock_user_repository.get_by_id.assert_awaited_once_with(4)

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_promoted_user_gains_admin(self, mock_user_repository, mock_token_service):
        mock_token_service.get_identity.return_value = TokenIdentity(user_id=2, is_admin=False)
        mock_user_repository.get_by_id.return_value = User(id=2, name="Owner", email="admin@storefront.io", is_admin=True)
        use_case = ResolveIdentityUseCase(mock_user_repository, mock_token_service)

        identity = await use_case.execute("signed-token")

        assert identity.is_admin

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_token_for_missing_user_rejected(self, mock_user_repository, mock_token_service):
        mock_token_service.get_identity.return_value = TokenIdentity(user_id=999, is_admin=False)
        mock_user_repository.get_by_id.return_value = None
        use_case = ResolveIdentityUseCase(mock_user_repository, mock_token_service)

        with pytest.raises(AuthenticationException):
            await use_case.execute("signed-token")
