"""S3-compatible storage backend implementation.

Implements the StorageBackend protocol for AWS S3, MinIO, and other
S3-compatible services using aioboto3.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import aioboto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from object_gateway.infra.storage.backends.protocol import ObjectMetadata, UploadResult
from object_gateway.infra.storage.exceptions import (
    StorageError,
    StorageNotConfiguredError,
    StorageUploadError,
    map_boto_error,
)

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from object_gateway.core.settings.storage import StorageSettings

logger = logging.getLogger(__name__)


class S3Backend:
    """S3-compatible storage backend.

    One aioboto3 client is opened at startup and shared by every request
    until shutdown.

    Example:
        backend = S3Backend(settings)
        await backend.startup()
        result = await backend.upload_object("file.txt", b"hello")
        await backend.shutdown()
    """

    def __init__(self, settings: StorageSettings) -> None:
        self.settings = settings
        self._session = aioboto3.Session()
        self._client: Any = None
        self._client_context: Any = None

    @property
    def backend_name(self) -> str:
        """Backend name identifier."""
        return "s3"

    @property
    def bucket(self) -> str:
        """Configured bucket."""
        return self.settings.bucket

    @property
    def is_ready(self) -> bool:
        """Check if backend is initialized and ready."""
        return self._client is not None

    # ========================================================================
    # Lifecycle Management
    # ========================================================================

    async def startup(self) -> None:
        """Open the S3 client and its connection pool."""
        if self._client is not None:
            logger.debug("S3 backend already initialized")
            return

        logger.info(
            "Initializing S3 backend",
            extra={
                "bucket": self.settings.bucket,
                "endpoint": self.settings.endpoint,
                "region": self.settings.region,
            },
        )

        boto_config = Config(
            retries={
                "max_attempts": self.settings.max_retries,
                "mode": self.settings.retry_mode,
            },
            connect_timeout=self.settings.timeout,
            read_timeout=self.settings.timeout,
            max_pool_connections=self.settings.max_pool_connections,
        )

        try:
            self._client_context = self._session.client(
                "s3",
                **self.settings.get_boto3_config(),
                config=boto_config,
            )
            self._client = await self._client_context.__aenter__()
        except (BotoCoreError, ClientError, ValueError) as e:
            self._client_context = None
            logger.exception("Failed to initialize S3 backend", extra={"error": str(e)})
            raise StorageError(
                f"Failed to initialize S3 backend: {e}",
                code="STORAGE_INITIALIZATION_ERROR",
            ) from e

        logger.info("S3 backend initialized successfully")

    async def shutdown(self) -> None:
        """Close the S3 client."""
        if self._client_context is None:
            logger.debug("S3 backend not initialized, nothing to shutdown")
            return

        logger.info("Shutting down S3 backend")
        try:
            await self._client_context.__aexit__(None, None, None)
        except (BotoCoreError, ClientError) as e:
            logger.warning("Error closing S3 client", extra={"error": str(e)})
        finally:
            self._client = None
            self._client_context = None

        logger.info("S3 backend shutdown complete")

    def _ensure_client(self) -> Any:
        """Return the live client.

        Raises:
            StorageNotConfiguredError: If startup() has not run
        """
        if self._client is None:
            msg = "S3 backend not initialized. Call startup() first."
            raise StorageNotConfiguredError(msg)
        return self._client

    # ========================================================================
    # Core Object Operations
    # ========================================================================

    async def upload_object(self, key: str, data: bytes) -> UploadResult:
        """Upload ``data`` to ``key`` with a single PutObject call.

        Raises:
            StorageError: If the backend rejects the request
            StorageUploadError: If the transport fails
        """
        client = self._ensure_client()
        bucket = self.settings.bucket

        try:
            response = await client.put_object(Bucket=bucket, Key=key, Body=data)
        except ClientError as e:
            logger.exception("Failed to upload object to S3", extra={"error": str(e)})
            raise map_boto_error(e, operation="upload", key=key) from e
        except BotoCoreError as e:
            logger.exception("Unexpected error during S3 upload", extra={"error": str(e)})
            raise StorageUploadError(
                f"Failed to upload {key}: {e}",
                metadata={"key": key, "bucket": bucket, "error": str(e)},
            ) from e

        logger.info(
            "Object uploaded to S3",
            extra={"key": key, "bucket": bucket, "size_bytes": len(data)},
        )
        return UploadResult(
            key=key,
            bucket=bucket,
            etag=response.get("ETag", "").strip('"') or None,
            size_bytes=len(data),
        )

    async def list_objects(
        self,
        prefix: str = "",
        max_keys: int = 1000,
        continuation_token: str | None = None,
    ) -> tuple[list[ObjectMetadata], str | None]:
        """List one page of objects with ListObjectsV2.

        Returns:
            Tuple of (object list, next continuation token or None)
        """
        client = self._ensure_client()
        bucket = self.settings.bucket

        kwargs: dict[str, Any] = {
            "Bucket": bucket,
            "Prefix": prefix,
            "MaxKeys": max_keys,
        }
        if continuation_token:
            kwargs["ContinuationToken"] = continuation_token

        try:
            response = await client.list_objects_v2(**kwargs)
        except ClientError as e:
            logger.exception("Failed to list objects in S3", extra={"error": str(e)})
            raise map_boto_error(e, operation="list", key=prefix) from e
        except BotoCoreError as e:
            logger.exception("Unexpected error during S3 list", extra={"error": str(e)})
            raise StorageError(
                f"Failed to list objects with prefix {prefix!r}: {e}",
                code="STORAGE_LIST_ERROR",
                metadata={"prefix": prefix, "bucket": bucket, "error": str(e)},
            ) from e

        objects = [
            ObjectMetadata(
                key=item.get("Key", ""),
                size_bytes=item.get("Size"),
                last_modified=item.get("LastModified"),
            )
            for item in response.get("Contents", [])
        ]
        next_token = response.get("NextContinuationToken")

        logger.debug(
            "Listed objects from S3",
            extra={
                "bucket": bucket,
                "prefix": prefix,
                "count": len(objects),
                "has_more": next_token is not None,
            },
        )
        return objects, next_token

    async def stream_objects(self, prefix: str = "") -> AsyncIterator[ObjectMetadata]:
        """Stream all objects matching prefix (automatic pagination)."""
        continuation_token: str | None = None

        while True:
            objects, continuation_token = await self.list_objects(
                prefix=prefix,
                max_keys=self.settings.list_page_size,
                continuation_token=continuation_token,
            )
            for obj in objects:
                yield obj

            if continuation_token is None:
                break

    async def delete_object(self, key: str) -> bool:
        """Delete an object with DeleteObject.

        S3 reports success for keys that do not exist.
        """
        client = self._ensure_client()
        bucket = self.settings.bucket

        try:
            await client.delete_object(Bucket=bucket, Key=key)
        except ClientError as e:
            logger.exception("Failed to delete object from S3", extra={"error": str(e)})
            raise map_boto_error(e, operation="delete", key=key) from e
        except BotoCoreError as e:
            logger.exception("Unexpected error during S3 deletion", extra={"error": str(e)})
            raise StorageError(
                f"Failed to delete {key}: {e}",
                code="STORAGE_DELETE_ERROR",
                metadata={"key": key, "bucket": bucket, "error": str(e)},
            ) from e

        logger.info("Object deleted from S3", extra={"key": key, "bucket": bucket})
        return True

