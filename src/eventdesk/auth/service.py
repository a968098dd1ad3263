"""
Authentication service: registration, login and session verification.
"""

from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from eventdesk.auth.jwt import JWTService, JWTServiceProtocol
from eventdesk.auth.models import User, UserRole
from eventdesk.auth.passwords import dummy_password_hash, hash_password, verify_password
from eventdesk.auth.repository import UserRepository, UserRepositoryProtocol
from eventdesk.auth.schemas import (
    RegisterRequest,
    TokenResponse,
    UserProfile,
)
from eventdesk.config import Settings, get_settings
from eventdesk.shared.exceptions import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
)
from eventdesk.shared.logging import get_logger

logger = get_logger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class AuthService:
    """Service for authentication operations."""

    def __init__(
        self,
        session: AsyncSession,
        settings: Settings | None = None,
        jwt_service: JWTServiceProtocol | None = None,
        user_repository: UserRepositoryProtocol | None = None,
    ) -> None:
        """Initialize authentication service.

        Args:
            session: Database session.
            settings: Application settings.
            jwt_service: JWT service for token operations.
            user_repository: User repository for database operations.
        """
        self._settings = settings or get_settings()
        self._session = session
        self._jwt_service = jwt_service or JWTService(self._settings)
        self._user_repository = user_repository or UserRepository(session)

    async def register(self, data: RegisterRequest) -> UserProfile:
        """Create a new account.

        Self-registered accounts are viewers unless role selection is enabled.

        Raises:
            ConflictError: If the email is already registered.
        """
        email = data.email.strip().lower()
        if await self._user_repository.get_by_email(email) is not None:
            raise ConflictError(
                message="Email already registered",
                code="EMAIL_TAKEN",
            )

        role = UserRole.VIEWER
        if self._settings.allow_registration_role_selection and data.role is not None:
            role = data.role

        user = await self._user_repository.create(
            User(
                email=email,
                name=data.name,
                password_hash=hash_password(data.password, rounds=self._settings.bcrypt_rounds),
                role=role,
            )
        )

        logger.info(
            "User registered",
            extra={"user_id": str(user.id), "role": user.role.value},
        )
        return UserProfile.model_validate(user)

    async def authenticate(self, email: str, password: str) -> TokenResponse:
        """Validate credentials and issue a session token.

        Unknown emails and wrong passwords fail identically.

        Raises:
            AuthenticationError: If the credentials are not valid.
        """
        user = await self._user_repository.get_by_email(email)

        if user is None:
            verify_password(password, dummy_password_hash())
            logger.info("Login failed", extra={"reason": "credentials"})
            raise AuthenticationError(
                message=INVALID_CREDENTIALS_MESSAGE,
                code="INVALID_CREDENTIALS",
            )

        if not verify_password(password, user.password_hash):
            logger.info("Login failed", extra={"reason": "credentials"})
            raise AuthenticationError(
                message=INVALID_CREDENTIALS_MESSAGE,
                code="INVALID_CREDENTIALS",
            )

        access_token = self._jwt_service.create_access_token(
            user_id=user.id,
            email=user.email,
            name=user.name,
            role=user.role.value,
        )

        logger.info(
            "User authenticated",
            extra={"user_id": str(user.id), "role": user.role.value},
        )

        return TokenResponse(
            access_token=access_token,
            expires_in=self._jwt_service.get_token_expiry_seconds(),
            user=UserProfile.model_validate(user),
        )

    async def get_user_profile(self, user_id: UUID) -> UserProfile:
        """Get user profile by ID.

        Raises:
            NotFoundError: If the user no longer exists.
        """
        user = await self._user_repository.get_by_id(user_id)
        if user is None:
            raise NotFoundError(
                message="User not found",
                code="USER_NOT_FOUND",
            )
        return UserProfile.model_validate(user)
