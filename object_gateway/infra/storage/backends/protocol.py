"""Storage backend protocol and normalized data structures.

This module defines:
- Protocol interface that all storage backends must implement
- Normalized data structures for cross-backend compatibility
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import AsyncIterator
    from datetime import datetime

# ============================================================================
# Normalized Data Structures
# ============================================================================


@dataclass(frozen=True)
class ObjectMetadata:
    """Normalized object metadata across all storage backends.

    Only the fields surfaced by the gateway are kept.

    Attributes:
        key: Object key
        size_bytes: Object size in bytes
        last_modified: Last modification timestamp
    """

    key: str
    size_bytes: int | None
    last_modified: datetime | None


@dataclass(frozen=True)
class UploadResult:
    """Result of an upload operation.

    Attributes:
        key: Object key where the data was stored
        bucket: Bucket name
        etag: Entity tag of the stored object
        size_bytes: Size of the stored object in bytes
    """

    key: str
    bucket: str
    etag: str | None
    size_bytes: int


# ============================================================================
# Storage Backend Protocol
# ============================================================================


class StorageBackend(Protocol):
    """Protocol interface for storage backends.

    Uses structural typing (Protocol) rather than inheritance, so test
    doubles only need the matching methods.
    """

    @property
    def backend_name(self) -> str:
        """Name of the backend (e.g., 's3', 'memory')."""
        ...

    @property
    def bucket(self) -> str:
        """Bucket all operations run against."""
        ...

    @property
    def is_ready(self) -> bool:
        """Check if backend is initialized and ready for operations."""
        ...

    async def startup(self) -> None:
        """Initialize backend (create clients, connection pools, etc.)."""
        ...

    async def shutdown(self) -> None:
        """Gracefully shutdown backend (close connections, cleanup resources)."""
        ...

    async def upload_object(self, key: str, data: bytes) -> UploadResult:
        """Store ``data`` under ``key``, overwriting any existing object.

        Raises:
            StorageError: If upload fails
        """
        ...

    async def list_objects(
        self,
        prefix: str = "",
        max_keys: int = 1000,
        continuation_token: str | None = None,
    ) -> tuple[list[ObjectMetadata], str | None]:
        """List one page of objects.

        Returns:
            Tuple of (object list, next continuation token or None)

        Raises:
            StorageError: If listing fails
        """
        ...

    def stream_objects(self, prefix: str = "") -> AsyncIterator[ObjectMetadata]:
        """Yield every object matching ``prefix``, following continuation tokens."""
        ...

    async def delete_object(self, key: str) -> bool:
        """Delete an object. Deleting a missing key succeeds.

        Raises:
            StorageError: If deletion fails
        """
        ...
