"""In-memory storage backend.

Keeps every object in a process-local dict. Useful for running the gateway
without an S3 endpoint and as a substitutable backend in tests:

    backend = InMemoryBackend(bucket="uploads", page_size=2)
    await backend.upload_object("a.txt", b"hello")
    assert "a.txt" in backend.objects
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
import hashlib
import logging
from typing import TYPE_CHECKING

from object_gateway.infra.storage.backends.protocol import ObjectMetadata, UploadResult
from object_gateway.infra.storage.exceptions import StorageNotConfiguredError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@dataclass
class StoredObject:
    """An object held by the in-memory backend."""

    data: bytes
    last_modified: datetime = field(default_factory=lambda: datetime.now(UTC))


class InMemoryBackend:
    """Dict-backed implementation of the StorageBackend protocol.

    Listing is key-ordered and paginated by ``page_size`` with the next key
    used as the continuation token, mirroring ListObjectsV2.
    """

    def __init__(self, bucket: str = "uploads", page_size: int = 1000) -> None:
        self._bucket = bucket
        self.page_size = page_size
        self.objects: dict[str, StoredObject] = {}
        self._ready = False

    @property
    def backend_name(self) -> str:
        return "memory"

    @property
    def bucket(self) -> str:
        return self._bucket

    @property
    def is_ready(self) -> bool:
        return self._ready

    async def startup(self) -> None:
        self._ready = True
        logger.info("In-memory storage backend ready", extra={"bucket": self._bucket})

    async def shutdown(self) -> None:
        self._ready = False
        self.objects.clear()

    def _ensure_ready(self) -> None:
        if not self._ready:
            msg = "In-memory backend not initialized. Call startup() first."
            raise StorageNotConfiguredError(msg)

    async def upload_object(self, key: str, data: bytes) -> UploadResult:
        self._ensure_ready()
        self.objects[key] = StoredObject(data=bytes(data))
        logger.info(
            "Object stored in memory",
            extra={"key": key, "bucket": self._bucket, "size_bytes": len(data)},
        )
        return UploadResult(
            key=key,
            bucket=self._bucket,
            etag=hashlib.md5(data, usedforsecurity=False).hexdigest(),
            size_bytes=len(data),
        )

    async def list_objects(
        self,
        prefix: str = "",
        max_keys: int = 1000,
        continuation_token: str | None = None,
    ) -> tuple[list[ObjectMetadata], str | None]:
        self._ensure_ready()
        keys = sorted(k for k in self.objects if k.startswith(prefix))
        if continuation_token is not None:
            keys = [k for k in keys if k >= continuation_token]

        page, rest = keys[:max_keys], keys[max_keys:]
        objects = [
            ObjectMetadata(
                key=key,
                size_bytes=len(self.objects[key].data),
                last_modified=self.objects[key].last_modified,
            )
            for key in page
        ]
        return objects, (rest[0] if rest else None)

    async def stream_objects(self, prefix: str = "") -> AsyncIterator[ObjectMetadata]:
        continuation_token: str | None = None

        while True:
            objects, continuation_token = await self.list_objects(
                prefix=prefix,
                max_keys=self.page_size,
                continuation_token=continuation_token,
            )
            for obj in objects:
                yield obj

            if continuation_token is None:
                break

    async def delete_object(self, key: str) -> bool:
        self._ensure_ready()
        self.objects.pop(key, None)
        logger.info("Object deleted from memory", extra={"key": key, "bucket": self._bucket})
        return True
