"""Backend factory for creating storage backends from settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from object_gateway.core.settings.storage import StorageBackendType
from object_gateway.infra.storage.exceptions import StorageNotConfiguredError

if TYPE_CHECKING:
    from object_gateway.core.settings.storage import StorageSettings

    from .protocol import StorageBackend


def create_storage_backend(settings: StorageSettings) -> StorageBackend:
    """Create the storage backend selected by ``settings.backend``.

    The backend is returned un-started; call ``startup()`` before use.

    Raises:
        StorageNotConfiguredError: If the backend type is unsupported

    Example:
        backend = create_storage_backend(get_storage_settings())
        await backend.startup()
        await backend.upload_object("file.txt", b"data")
        await backend.shutdown()
    """
    match settings.backend:
        case StorageBackendType.S3:
            from .s3.backend import S3Backend

            return S3Backend(settings)

        case StorageBackendType.MEMORY:
            from .memory import InMemoryBackend

            return InMemoryBackend(bucket=settings.bucket, page_size=settings.list_page_size)

        case _:
            msg = (
                f"Unsupported storage backend: {settings.backend}. "
                f"Supported backends: {', '.join(t.value for t in StorageBackendType)}"
            )
            raise StorageNotConfiguredError(msg)
