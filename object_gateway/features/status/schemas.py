"""Status and health check response schemas."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class LivenessResponse(BaseModel):
    """Liveness check response.

    Example:
        ```json
        {"status": "ok", "timestamp": "2025-01-01T00:00:00Z"}
        ```
    """

    status: Literal["ok"] = Field(default="ok", description="Always 'ok' while the process serves")
    timestamp: datetime = Field(description="Check timestamp (UTC)")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"status": "ok", "timestamp": "2025-01-01T00:00:00Z"},
        }
    )


class RootResponse(BaseModel):
    """Root greeting."""

    message: str
