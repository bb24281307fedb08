"""
Error taxonomy shared by the auth flows and the task routes.

Every error carries the HTTP status it maps to and a generic, client-safe
message. ``api.middleware.register_exception_handlers`` turns them into
``{"message": ...}`` JSON bodies.
"""

from __future__ import annotations

from fastapi import status


class AppError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    message: str = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        if message is not None:
            self.message = message
        super().__init__(self.message)


class ValidationError(AppError):
    """A required field is missing or empty."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "Missing required fields"


class DuplicateUserError(AppError):
    """The email is already registered."""

    status_code = status.HTTP_400_BAD_REQUEST
    message = "User already exists"


class InvalidCredentialsError(AppError):
    """Unknown email or wrong password; the two are deliberately identical."""

    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Invalid email or password"


class UnauthorizedError(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    message = "Not authorized, token failed"


class TaskNotFoundError(AppError):
    status_code = status.HTTP_404_NOT_FOUND
    message = "Task not found"


class InternalError(AppError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    message = "Internal server error"
