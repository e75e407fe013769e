"""Dependencies for the files endpoints.

The injected dependencies never raise. Handlers validate their input first and
only then call ``require_ready``, so missing input is a 400 even while storage
is down.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from pathlib import Path
from typing import Annotated

from fastapi import Depends, Request
from starlette.datastructures import UploadFile

from object_gateway.core.settings import get_storage_settings
from object_gateway.infra.storage.backends.protocol import StorageBackend
from object_gateway.infra.storage.exceptions import StorageNotConfiguredError

UPLOAD_FIELD = "file"


def get_storage_backend(request: Request) -> StorageBackend | None:
    """Return the backend published by the application lifespan, if any."""
    return getattr(request.app.state, "storage_backend", None)


def require_ready(backend: StorageBackend | None) -> StorageBackend:
    """Return ``backend`` once it is started.

    Raises:
        StorageNotConfiguredError: If the backend is missing or not started
    """
    if backend is None or not backend.is_ready:
        raise StorageNotConfiguredError("Storage backend is not available")
    return backend


async def get_upload_file(request: Request) -> AsyncIterator[UploadFile | None]:
    """Yield the ``file`` part of a multipart form.

    Yields None when the part is absent, is a plain text field, or carries
    no filename. Spooled parts are closed once the request is done.
    """
    form = await request.form()
    try:
        upload = form.get(UPLOAD_FIELD)
        if isinstance(upload, UploadFile) and upload.filename:
            yield upload
        else:
            yield None
    finally:
        await form.close()


def get_staging_dir() -> Path:
    """Directory where uploads are staged before being forwarded."""
    return get_storage_settings().staging_dir


StorageBackendDep = Annotated[StorageBackend | None, Depends(get_storage_backend)]
UploadFileDep = Annotated[UploadFile | None, Depends(get_upload_file)]
StagingDirDep = Annotated[Path, Depends(get_staging_dir)]

__all__ = [
    "UPLOAD_FIELD",
    "StagingDirDep",
    "StorageBackendDep",
    "UploadFileDep",
    "get_staging_dir",
    "get_storage_backend",
    "get_upload_file",
    "require_ready",
]
