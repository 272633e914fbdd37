"""Application error hierarchy.

Every error carries the HTTP status it maps to and a message that is safe to
show to the client. The exception handlers in ``pokemon_logger.main`` turn any
``AppError`` into an ``{"error": message}`` body.
"""

from http import HTTPStatus


class AppError(Exception):
    """Base class for errors reported to the client."""

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """Missing or malformed input."""

    status_code = HTTPStatus.BAD_REQUEST
    message = "Invalid request"


class InvalidCategoryError(ValidationError):
    message = "Invalid category"


class ConflictError(AppError):
    """A unique key already exists."""

    status_code = HTTPStatus.BAD_REQUEST
    message = "Already exists"


class AuthError(AppError):
    """Credentials or token could not be verified."""

    status_code = HTTPStatus.UNAUTHORIZED
    message = "Invalid credentials"


class UnauthorizedError(AuthError):
    message = "Access token required"


class ForbiddenError(AuthError):
    status_code = HTTPStatus.FORBIDDEN
    message = "Invalid token"


class NotFoundError(AppError):
    """Row absent, owned by someone else, or unknown upstream."""

    status_code = HTTPStatus.NOT_FOUND
    message = "Not found"


class UpstreamError(AppError):
    """An external collaborator failed."""

    status_code = HTTPStatus.INTERNAL_SERVER_ERROR
    message = "Upstream service failed"


class InternalError(AppError):
    """Unexpected storage failure."""

    message = "Database error"
