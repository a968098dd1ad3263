"""
Domain exceptions shared across the application.

Each error carries the HTTP status it maps to; ``eventdesk.main`` turns
them into ``{"detail": {"code": ..., "message": ...}}`` responses.
"""

from typing import Any


class AppError(Exception):
    """Base class for application errors."""

    status_code: int = 500
    default_code: str = "INTERNAL_ERROR"
    default_message: str = "Application error"

    def __init__(
        self,
        message: str | None = None,
        code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message

    def to_detail(self) -> dict[str, Any]:
        """Build the response ``detail`` payload."""
        detail: dict[str, Any] = {"code": self.code, "message": self.message}
        detail.update(self.details)
        return detail


class AuthenticationError(AppError):
    """Missing or rejected credentials."""

    status_code = 401
    default_code = "AUTHENTICATION_FAILED"
    default_message = "Authentication required"


class InvalidTokenError(AuthenticationError):
    default_code = "INVALID_TOKEN"
    default_message = "Invalid token"


class TokenExpiredError(AuthenticationError):
    default_code = "TOKEN_EXPIRED"
    default_message = "Token expired"


class ForbiddenError(AppError):
    """Authenticated, but the role does not permit the action."""

    status_code = 403
    default_code = "INSUFFICIENT_PERMISSIONS"
    default_message = "Insufficient permissions"


class ValidationError(AppError):
    status_code = 400
    default_code = "VALIDATION_ERROR"
    default_message = "Validation failed"


class NotFoundError(AppError):
    status_code = 404
    default_code = "NOT_FOUND"
    default_message = "Resource not found"


class ConflictError(AppError):
    status_code = 409
    default_code = "CONFLICT"
    default_message = "Resource already exists"
