"""API router for the files feature.

Every endpoint validates its input, then makes a single object store call.
Any failure of that call is logged with its detail and answered with a fixed
error message.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from object_gateway.features.files.dependencies import (
    UPLOAD_FIELD,
    StagingDirDep,
    StorageBackendDep,
    UploadFileDep,
    require_ready,
)
from object_gateway.features.files.exceptions import (
    DeleteFailedError,
    FileKeyRequiredError,
    ListFailedError,
    NoFileUploadedError,
    UploadFailedError,
)
from object_gateway.features.files.schemas import (
    ErrorResponse,
    MessageResponse,
    StoredObjectResponse,
)
from object_gateway.infra.storage.staging import staged_upload

router = APIRouter(tags=["files"])

logger = logging.getLogger(__name__)

_UPLOAD_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {UPLOAD_FIELD: {"type": "string", "format": "binary"}},
                    "required": [UPLOAD_FIELD],
                },
            },
        },
    },
}


@router.post(
    "/upload",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Upload a file",
    description="Upload a single file (form field `file`). It is stored under its original filename.",
    openapi_extra=_UPLOAD_BODY,
)
async def upload_file(
    file: UploadFileDep,
    storage: StorageBackendDep,
    staging_dir: StagingDirDep,
) -> MessageResponse:
    """Stage the upload locally, then forward it to the object store.

    The object key is the client's filename as-is, so a second upload with
    the same name replaces the first. The staged copy is removed whether or
    not the forward succeeds.

    Raises:
        NoFileUploadedError: No file part named ``file`` (400)
        UploadFailedError: Storage unavailable, staging or the forward failed (500)
    """
    if file is None:
        raise NoFileUploadedError

    try:
        backend = require_ready(storage)
        async with staged_upload(file.file, file.filename, staging_dir) as staged:
            content = await staged.read()
            result = await backend.upload_object(staged.filename, content)
    except Exception as e:
        logger.error(
            "Error uploading file",
            extra={"key": file.filename, "error": repr(e)},
        )
        raise UploadFailedError from e

    logger.info(
        "File uploaded",
        extra={"key": result.key, "size_bytes": result.size_bytes, "etag": result.etag},
    )
    return MessageResponse(message="File uploaded successfully")


@router.get(
    "/files",
    response_model=list[StoredObjectResponse],
    response_model_exclude_none=True,
    responses={500: {"model": ErrorResponse}},
    summary="List stored files",
    description="List every object in the bucket as key, lastModified and size.",
)
async def list_files(storage: StorageBackendDep) -> list[StoredObjectResponse]:
    """List the whole bucket, following continuation tokens across pages.

    Raises:
        ListFailedError: Storage unavailable or the listing failed (500)
    """
    try:
        backend = require_ready(storage)
        objects = [obj async for obj in backend.stream_objects()]
    except Exception as e:
        logger.error("Error listing files", extra={"error": repr(e)})
        raise ListFailedError from e

    return [StoredObjectResponse.from_metadata(obj) for obj in objects]


@router.delete(
    "/files/{key:path}",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Delete a file",
    description="Delete an object by key. Deleting a key that does not exist succeeds.",
)
async def delete_file(key: str, storage: StorageBackendDep) -> MessageResponse:
    """Delete one object.

    Raises:
        FileKeyRequiredError: Empty key (400)
        DeleteFailedError: Storage unavailable or the delete failed (500)
    """
    if not key:
        raise FileKeyRequiredError

    try:
        backend = require_ready(storage)
        await backend.delete_object(key)
    except Exception as e:
        logger.error("Error deleting file", extra={"key": key, "error": repr(e)})
        raise DeleteFailedError from e

    return MessageResponse(message="File deleted successfully")


@router.delete(
    "/files",
    response_model=MessageResponse,
    responses={400: {"model": ErrorResponse}},
    include_in_schema=False,
)
async def delete_file_without_key() -> MessageResponse:
    """``DELETE /files`` carries no key at all."""
    raise FileKeyRequiredError
