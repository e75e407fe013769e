"""Storage infrastructure for S3-compatible object storage.

Quick Start:
    from object_gateway.infra.storage import create_storage_backend

    backend = create_storage_backend(get_storage_settings())
    await backend.startup()

    async with staged_upload(file.file, file.filename, staging_dir) as staged:
        await backend.upload_object(staged.filename, await staged.read())

    async for obj in backend.stream_objects():
        print(obj.key, obj.size_bytes)
"""

from __future__ import annotations

from object_gateway.core.settings.storage import StorageBackendType, StorageSettings

from .backends import (
    InMemoryBackend,
    ObjectMetadata,
    StorageBackend,
    UploadResult,
    create_storage_backend,
)
from .exceptions import (
    StorageError,
    StorageFileNotFoundError,
    StorageNotConfiguredError,
    StoragePermissionError,
    StorageTimeoutError,
    StorageUploadError,
    map_boto_error,
)
from .staging import StagedFile, staged_upload

__all__ = [
    "InMemoryBackend",
    "ObjectMetadata",
    "StagedFile",
    "StorageBackend",
    "StorageBackendType",
    "StorageError",
    "StorageFileNotFoundError",
    "StorageNotConfiguredError",
    "StoragePermissionError",
    "StorageSettings",
    "StorageTimeoutError",
    "StorageUploadError",
    "UploadResult",
    "create_storage_backend",
    "map_boto_error",
    "staged_upload",
]
