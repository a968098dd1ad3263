"""
Session lookup: resolves the bearer token of a request into the caller's identity.
"""

from dataclasses import dataclass
from typing import Annotated
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from eventdesk.auth.jwt import JWTService
from eventdesk.auth.models import UserRole
from eventdesk.config import get_settings
from eventdesk.shared.exceptions import AuthenticationError

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class CurrentUser:
    """Identity and role of the authenticated caller."""

    id: UUID
    email: str
    name: str
    role: UserRole


def get_jwt_service() -> JWTService:
    """Dependency for the JWT service."""
    return JWTService(get_settings())


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
    jwt_service: Annotated[JWTService, Depends(get_jwt_service)],
) -> CurrentUser:
    """Return the caller's identity, or fail with 401.

    Raises:
        AuthenticationError: No bearer token was sent.
        InvalidTokenError: The token failed validation.
        TokenExpiredError: The session expired.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(message="Not authenticated", code="MISSING_TOKEN")

    payload = jwt_service.verify_token(credentials.credentials)
    return CurrentUser(
        id=payload.sub,
        email=payload.email,
        name=payload.name,
        role=payload.role,
    )


CurrentUserDep = Annotated[CurrentUser, Depends(get_current_user)]
