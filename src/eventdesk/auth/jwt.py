"""JWT token handling for login sessions."""

from datetime import datetime, timedelta, timezone
from typing import Protocol
from uuid import UUID

import jwt
from jwt.exceptions import ExpiredSignatureError, PyJWTError

from eventdesk.auth.schemas import TokenPayload
from eventdesk.config import Settings, get_settings
from eventdesk.shared.exceptions import InvalidTokenError, TokenExpiredError
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)


class JWTServiceProtocol(Protocol):
    """Protocol for session token operations."""

    def create_access_token(self, user_id: UUID, email: str, name: str, role: str) -> str: ...
    def verify_token(self, token: str) -> TokenPayload: ...
    def get_token_expiry_seconds(self) -> int: ...


class JWTService:
    """Creates and validates signed session tokens."""

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings or get_settings()

    def create_access_token(
        self,
        user_id: UUID,
        email: str,
        name: str,
        role: str,
    ) -> str:
        """Create a signed access token carrying the user's identity and role."""
        now = datetime.now(timezone.utc)
        expires = now + timedelta(minutes=self._settings.jwt_access_token_expire_minutes)

        payload = {
            "sub": str(user_id),
            "email": email,
            "name": name,
            "role": role,
            "type": "access",
            "iat": now,
            "exp": expires,
        }

        return jwt.encode(
            payload,
            self._settings.jwt_secret_key,
            algorithm=self._settings.jwt_algorithm,
        )

    def verify_token(self, token: str) -> TokenPayload:
        """Decode and validate a token.

        Raises:
            TokenExpiredError: If the token is past its expiry.
            InvalidTokenError: If the signature, structure or type is wrong.
        """
        try:
            payload = jwt.decode(
                token,
                self._settings.jwt_secret_key,
                algorithms=[self._settings.jwt_algorithm],
                options={"require": ["sub", "exp", "iat"]},
            )
        except ExpiredSignatureError as e:
            logger.info("Token expired")
            raise TokenExpiredError() from e
        except PyJWTError as e:
            logger.warning("Invalid token", extra={"reason": str(e)})
            raise InvalidTokenError() from e

        if payload.get("type") != "access":
            raise InvalidTokenError(message="Not an access token")

        try:
            return TokenPayload.model_validate(payload)
        except ValueError as e:
            raise InvalidTokenError(message="Malformed token claims") from e

    def get_token_expiry_seconds(self) -> int:
        """Get access token lifetime in seconds."""
        return self._settings.jwt_access_token_expire_minutes * 60
