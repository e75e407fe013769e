"""Pydantic schemas for the files API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from object_gateway.infra.storage.backends.protocol import ObjectMetadata


class MessageResponse(BaseModel):
    """Plain success message."""

    message: str = Field(description="Human-readable outcome")


class ErrorResponse(BaseModel):
    """Error payload returned for every 4xx/5xx response."""

    error: str = Field(description="Human-readable error message")


class StoredObjectResponse(BaseModel):
    """Projection of a stored object.

    Example:
        ```json
        {"key": "a.txt", "lastModified": "2025-01-01T00:00:00Z", "size": 5}
        ```
    """

    key: str = Field(description="Object key (the original filename)")
    last_modified: datetime | None = Field(
        default=None,
        alias="lastModified",
        description="Last modification timestamp",
    )
    size: int | None = Field(default=None, description="Object size in bytes")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_metadata(cls, obj: ObjectMetadata) -> StoredObjectResponse:
        return cls(key=obj.key, last_modified=obj.last_modified, size=obj.size_bytes)
