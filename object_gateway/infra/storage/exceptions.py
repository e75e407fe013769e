"""Storage-specific exceptions for S3/MinIO operations.

Backends raise these instead of leaking botocore exceptions, so callers can
handle a single hierarchy regardless of the storage implementation.

Example:
    ```python
    from object_gateway.infra.storage.exceptions import StorageError, map_boto_error

    try:
        await client.delete_object(Bucket=bucket, Key=key)
    except ClientError as e:
        raise map_boto_error(e, operation="delete", key=key) from e
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from object_gateway.core.exceptions import AppException

if TYPE_CHECKING:
    from botocore.exceptions import ClientError


class StorageError(AppException):
    """Base exception for all storage-related errors.

    Attributes:
        code: Error code identifier for programmatic error handling.
        message: Human-readable error message.
        extra: Additional context (bucket, key, backend error code).
    """

    def __init__(
        self,
        message: str,
        code: str,
        status_code: int = 500,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        """Initialize storage error.

        Args:
            message: Human-readable error message.
            code: Error code for programmatic handling.
            status_code: HTTP status code (default: 500).
            metadata: Additional error context.
        """
        self.code = code
        self.message = message
        super().__init__(
            status_code=status_code,
            detail=message,
            type=code.lower().replace("_", "-"),
            extra=metadata or {},
        )


class StorageNotConfiguredError(StorageError):
    """Raised when storage is used before it is configured or started."""

    def __init__(
        self,
        message: str = "Storage is not configured or enabled",
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="STORAGE_NOT_CONFIGURED",
            status_code=503,
            metadata=metadata,
        )


class StorageFileNotFoundError(StorageError):
    """Raised when a bucket or object does not exist."""

    def __init__(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="STORAGE_NOT_FOUND",
            status_code=404,
            metadata=metadata,
        )


class StorageUploadError(StorageError):
    """Raised when an upload fails for a reason other than a backend error code."""

    def __init__(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="STORAGE_UPLOAD_ERROR",
            status_code=500,
            metadata=metadata,
        )


class StoragePermissionError(StorageError):
    """Raised when credentials are missing, invalid, or lack permission."""

    def __init__(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="STORAGE_PERMISSION_DENIED",
            status_code=403,
            metadata=metadata,
        )


class StorageTimeoutError(StorageError):
    """Raised when the backend times out or throttles the request."""

    def __init__(
        self,
        message: str,
        metadata: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code="STORAGE_TIMEOUT",
            status_code=504,
            metadata=metadata,
        )


def map_boto_error(
    error: ClientError,
    operation: str,
    key: str | None = None,
) -> StorageError:
    """Map a botocore ClientError to a domain-specific StorageError.

    Args:
        error: The botocore ClientError to map.
        operation: The storage operation being performed (e.g., "upload", "list").
        key: Optional object key being operated on.

    Returns:
        StorageError: Appropriate domain-specific storage exception.

    Error Code Mappings:
        - NoSuchKey, NoSuchBucket -> StorageFileNotFoundError (404)
        - AccessDenied, ExpiredToken, InvalidAccessKeyId, ... -> StoragePermissionError (403)
        - RequestTimeout, RequestTimeTooSkewed, SlowDown -> StorageTimeoutError (504)
        - Others -> StorageError (500)
    """
    error_info = error.response.get("Error", {})
    error_code = error_info.get("Code", "Unknown")
    error_message = error_info.get("Message", str(error))

    metadata: dict[str, Any] = {
        "operation": operation,
        "aws_error_code": error_code,
        "aws_error_message": error_message,
        "request_id": error.response.get("ResponseMetadata", {}).get("RequestId"),
    }
    if key:
        metadata["key"] = key

    message = f"{operation.capitalize()} failed: {error_message}"

    if error_code in {"NoSuchKey", "NoSuchBucket"}:
        return StorageFileNotFoundError(message=message, metadata=metadata)

    if error_code in {
        "AccessDenied",
        "ExpiredToken",
        "InvalidAccessKeyId",
        "SignatureDoesNotMatch",
        "InvalidToken",
        "TokenRefreshRequired",
    }:
        return StoragePermissionError(message=message, metadata=metadata)

    if error_code in {"RequestTimeout", "RequestTimeTooSkewed", "SlowDown"}:
        return StorageTimeoutError(
            message=f"{operation.capitalize()} timed out: {error_message}",
            metadata=metadata,
        )

    return StorageError(
        message=message,
        code="STORAGE_ERROR",
        status_code=500,
        metadata=metadata,
    )
