"""Authentication API routes."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.middleware import CurrentUserDep
from eventdesk.auth.schemas import LoginRequest, RegisterRequest, TokenResponse, UserProfile
from eventdesk.auth.service import AuthService
from eventdesk.config import get_settings
from eventdesk.shared.database import get_db_session

router = APIRouter(prefix="/api/auth", tags=["auth"])


def get_auth_service(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> AuthService:
    """Dependency for the authentication service."""
    return AuthService(session=session, settings=get_settings())


@router.post(
    "/register",
    response_model=UserProfile,
    status_code=status.HTTP_201_CREATED,
    summary="Register an account",
)
async def register(
    data: RegisterRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserProfile:
    """Create an account; the email must not be registered yet."""
    return await service.register(data)


@router.post(
    "/login",
    response_model=TokenResponse,
    summary="Log in with email and password",
)
async def login(
    data: LoginRequest,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> TokenResponse:
    """Exchange credentials for a session token."""
    return await service.authenticate(data.email, data.password)


@router.get(
    "/me",
    response_model=UserProfile,
    summary="Get current user profile",
)
async def get_me(
    current_user: CurrentUserDep,
    service: Annotated[AuthService, Depends(get_auth_service)],
) -> UserProfile:
    """Return the authenticated user's profile."""
    return await service.get_user_profile(current_user.id)
