"""Custom exception classes for the application."""

from __future__ import annotations

from typing import Any


class AppException(Exception):
    """Base application exception.

    All custom exceptions should inherit from this class. The global
    exception handler renders instances as ``{"error": detail}`` with
    ``status_code`` as the HTTP status.

    Attributes:
        status_code: HTTP status code for the error.
        detail: Public, human-readable error message.
        type: Error type identifier for logs.
        extra: Additional context-specific information about the error.
            Logged, never returned to the caller.

    Example:
        raise AppException(
            status_code=404,
            detail="Resource not found",
            type="resource-not-found",
            extra={"resource_id": "abc123"}
        )
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        type: str = "about:blank",
        extra: dict[str, Any] | None = None,
    ) -> None:
        """Initialize application exception.

        Args:
            status_code: HTTP status code.
            detail: Human-readable error message.
            type: Error type identifier.
            extra: Additional context about the error.
        """
        self.status_code = status_code
        self.detail = detail
        self.type = type
        self.extra = extra or {}
        super().__init__(detail)


class BadRequestException(AppException):
    """Exception raised for malformed requests.

    Example:
        raise BadRequestException(
            detail="Invalid request format",
            type="bad-request",
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "bad-request",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=400,
            detail=detail,
            type=type,
            extra=extra,
        )


class InternalServerException(AppException):
    """Exception raised for internal server errors.

    Example:
        raise InternalServerException(
            detail="An unexpected error occurred",
            type="internal-error",
        )
    """

    def __init__(
        self,
        detail: str,
        type: str = "internal-error",
        extra: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            status_code=500,
            detail=detail,
            type=type,
            extra=extra,
        )

