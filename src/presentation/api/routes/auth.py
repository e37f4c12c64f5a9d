"""
Rotas de autenticação.
"""
from fastapi import APIRouter, Depends, Request, status

from src.config import settings
from src.application.dtos import (
    ApiResponse,
    LoginRequestDTO,
    RefreshRequestDTO,
    RegisterRequestDTO
)
from src.application.use_cases import AuthUseCase
from src.domain.entities import User
from src.presentation.api.dependencies import (
    get_access_token,
    get_auth_use_case,
    get_current_user
)
from src.presentation.api.rate_limit import limiter

router = APIRouter(prefix=f"{settings.api_prefix}/auth", tags=["Auth"])


@router.post("/login", summary="Login")
@limiter.limit(settings.auth_rate_limit)
async def login(
    request: Request,
    body: LoginRequestDTO,
    auth: AuthUseCase = Depends(get_auth_use_case)
) -> dict:
    user, tokens = auth.login(body.email, body.password)
    return ApiResponse.ok(
        data=auth.session_payload(user, tokens),
        message="Login successful"
    ).to_content()


@router.post("/register", status_code=status.HTTP_201_CREATED, summary="Register")
@limiter.limit(settings.auth_rate_limit)
async def register(
    request: Request,
    body: RegisterRequestDTO,
    auth: AuthUseCase = Depends(get_auth_use_case)
) -> dict:
    user, tokens = auth.register(body.email, body.password, body.first_name, body.last_name)
    return ApiResponse.ok(
        data=auth.session_payload(user, tokens),
        message="Registration successful"
    ).to_content()


@router.post("/refresh", summary="Refresh tokens")
async def refresh(
    body: RefreshRequestDTO,
    auth: AuthUseCase = Depends(get_auth_use_case)
) -> dict:
    user, tokens = auth.refresh(body.refresh_token)
    return ApiResponse.ok(
        data=auth.session_payload(user, tokens),
        message="Token refreshed"
    ).to_content()


@router.post("/logout", summary="Logout")
async def logout(
    user: User = Depends(get_current_user),
    access_token: str = Depends(get_access_token),
    auth: AuthUseCase = Depends(get_auth_use_case)
) -> dict:
    auth.logout(access_token)
    return ApiResponse.ok(message="Logout successful").to_content()


@router.get("/me", summary="Current user")
async def me(user: User = Depends(get_current_user)) -> dict:
    return ApiResponse.ok(data=user.to_dict()).to_content()
