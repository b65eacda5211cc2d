"""Failure types raised by the Zuri API layer and the translation decorator."""

from functools import wraps
from typing import Any

from zurichat.utils.logger import logger


class Failure(Exception):
    """Base class for every recognized failure of the Zuri API layer."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: Any | None = None,
    ) -> None:
        """Initialize Failure.

        Args:
            message: Error message
            status_code: HTTP status code if applicable
            response_data: Parsed response body, if the server sent one
        """
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.response_data = response_data

    def __str__(self) -> str:
        """Return string representation of the failure."""
        if self.status_code:
            return f"{type(self).__name__} ({self.status_code}): {self.message}"
        return f"{type(self).__name__}: {self.message}"


class NetworkFailure(Failure):
    """Raised when the server could not be reached."""

    def __init__(
        self,
        message: str = "Unable to reach the server",
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message)
        self.original_error = original_error


class TimeoutFailure(NetworkFailure):
    """Raised when a request timed out."""

    def __init__(
        self,
        message: str = "Request timed out",
        timeout_duration: float | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message=message, original_error=original_error)
        self.timeout_duration = timeout_duration


class InputFailure(Failure):
    """Raised for rejected input (400, 422)."""

    def __init__(
        self,
        message: str = "Bad request - malformed or missing required parameters",
        status_code: int = 400,
        response_data: Any | None = None,
    ) -> None:
        super().__init__(
            message=message, status_code=status_code, response_data=response_data
        )


class AuthFailure(Failure):
    """Raised when the session token is missing, invalid or expired (401)."""

    def __init__(
        self,
        message: str = "Authentication failed",
        response_data: Any | None = None,
    ) -> None:
        super().__init__(message=message, status_code=401, response_data=response_data)


class ForbiddenFailure(Failure):
    """Raised when the user may not perform the action (403)."""

    def __init__(
        self,
        message: str = "You do not have permission to perform this action",
        response_data: Any | None = None,
    ) -> None:
        super().__init__(message=message, status_code=403, response_data=response_data)


class NotFoundFailure(Failure):
    """Raised when the requested resource does not exist (404)."""

    def __init__(
        self,
        message: str = "The requested resource was not found",
        response_data: Any | None = None,
    ) -> None:
        super().__init__(message=message, status_code=404, response_data=response_data)


class RateLimitFailure(Failure):
    """Raised when the server throttles the client (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        response_data: Any | None = None,
        retry_after: int | None = None,
    ) -> None:
        super().__init__(message=message, status_code=429, response_data=response_data)
        self.retry_after = retry_after


class ServerFailure(Failure):
    """Raised for server errors (5xx) and unexpected error statuses."""

    def __init__(
        self,
        message: str = "Internal server error occurred",
        status_code: int = 500,
        response_data: Any | None = None,
    ) -> None:
        super().__init__(
            message=message, status_code=status_code, response_data=response_data
        )


class UnknownFailure(Failure):
    """Wraps any exception that is not already a recognized failure."""

    def __init__(self, error_message: str = "An unknown error occurred") -> None:
        super().__init__(message=error_message)
        self.error_message = error_message


def translate_failures(operation: str):
    """
    Decorator applying the failure convention to an API operation.

    Recognized failures are logged and re-raised unchanged. Anything else is
    logged and wrapped in an UnknownFailure carrying the original message.

    Args:
        operation: Name of the operation, used in log records

    Returns:
        Decorator function
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Failure as e:
                logger.warning(str(e), operation=operation)
                raise
            except Exception as e:
                logger.exception(
                    f"Unexpected error in {operation}",
                    operation=operation,
                    error_type=type(e).__name__,
                )
                raise UnknownFailure(error_message=str(e)) from e

        return wrapper

    return decorator
