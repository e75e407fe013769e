"""Request errors raised by the files endpoints.

Each error carries the fixed public message returned to the caller; the
underlying storage failure is only logged.
"""

from __future__ import annotations

from object_gateway.core.exceptions import BadRequestException, InternalServerException


class NoFileUploadedError(BadRequestException):
    """Raised when an upload request has no ``file`` part."""

    def __init__(self) -> None:
        super().__init__(detail="No file uploaded", type="no-file-uploaded")


class FileKeyRequiredError(BadRequestException):
    """Raised when a delete request has an empty key."""

    def __init__(self) -> None:
        super().__init__(detail="File key is required", type="file-key-required")


class UploadFailedError(InternalServerException):
    """Raised when the object store rejects an upload."""

    def __init__(self) -> None:
        super().__init__(detail="Failed to upload file", type="upload-failed")


class ListFailedError(InternalServerException):
    """Raised when listing the bucket fails."""

    def __init__(self) -> None:
        super().__init__(detail="Failed to retrieve file", type="list-failed")


class DeleteFailedError(InternalServerException):
    """Raised when the object store rejects a delete."""

    def __init__(self) -> None:
        super().__init__(detail="Failed to delete file", type="delete-failed")
