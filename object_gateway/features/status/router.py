"""Status and liveness endpoints.

The liveness check never touches the object store, so it reports a running
process, not a working storage connection.
"""

from __future__ import annotations

from datetime import UTC, datetime

from fastapi import APIRouter

from object_gateway.features.status.schemas import LivenessResponse, RootResponse

router = APIRouter(tags=["health"])


@router.get(
    "/",
    response_model=RootResponse,
    summary="Root greeting",
)
async def root() -> RootResponse:
    return RootResponse(message="Hello World!")


@router.get(
    "/health",
    response_model=LivenessResponse,
    summary="Liveness probe",
    description="Returns 200 while the process is serving requests",
)
async def liveness_check() -> LivenessResponse:
    """Liveness probe endpoint."""
    return LivenessResponse(status="ok", timestamp=datetime.now(UTC))
