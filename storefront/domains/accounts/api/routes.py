"""
Accounts API Routes
"""

from fastapi import APIRouter, Depends, status

from storefront.domains.accounts.api.dependencies import (
    get_authenticate_user_use_case,
    get_register_user_use_case,
)
from storefront.domains.accounts.api.schemas import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    RegisterResponse,
    UserResponse,
)
from storefront.domains.accounts.application.use_cases import (
    AuthenticateUserUseCase,
    RegisterUserRequest,
    RegisterUserUseCase,
)

router = APIRouter(prefix="/users", tags=["Users"])


@router.post("/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED)
async def register(
    body: RegisterRequest,
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
):
    """Create a customer account."""
    user = await use_case.execute(RegisterUserRequest(name=body.name, email=body.email, password=body.password))
    return RegisterResponse(
        message="User registered successfully",
        user=UserResponse.model_validate(user.to_public_dict()),
    )


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    use_case: AuthenticateUserUseCase = Depends(get_authenticate_user_use_case),
):
    """Exchange email and password for an access token."""
    result = await use_case.execute(body.email, body.password)
    return LoginResponse(
        message="Login successful",
        user=UserResponse.model_validate(result.user.to_public_dict()),
        access_token=result.access_token,
        token_type=result.token_type,
    )
