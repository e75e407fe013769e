"""Application lifespan management.

Startup Order:
1. Logging
2. Storage backend - built from settings unless one was injected

Shutdown Order: Reverse of startup
"""

from __future__ import annotations

from contextlib import asynccontextmanager
import logging
from typing import TYPE_CHECKING

from object_gateway.core.settings import (
    get_app_settings,
    get_logging_settings,
    get_storage_settings,
)
from object_gateway.infra.logging import setup_logging
from object_gateway.infra.storage.backends import create_storage_backend
from object_gateway.infra.storage.exceptions import StorageError

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from fastapi import FastAPI

logger = logging.getLogger(__name__)


async def _startup_storage(app: FastAPI) -> None:
    """Open the storage backend and publish it on ``app.state``."""
    settings = get_storage_settings()

    backend = getattr(app.state, "storage_backend", None)
    if backend is None:
        backend = create_storage_backend(settings)
        app.state.storage_backend = backend

    try:
        await backend.startup()
    except StorageError as e:
        if settings.startup_require_storage:
            logger.exception("Storage backend required but unavailable, failing startup")
            raise
        logger.warning(
            "Storage backend unavailable, continuing in degraded mode",
            extra={"error": str(e), "backend": backend.backend_name},
        )
        return

    logger.info(
        "Storage backend initialized",
        extra={
            "backend": backend.backend_name,
            "bucket": backend.bucket,
            "staging_dir": str(settings.staging_dir),
        },
    )


async def _shutdown_storage(app: FastAPI) -> None:
    backend = getattr(app.state, "storage_backend", None)
    if backend is None or not backend.is_ready:
        return

    try:
        await backend.shutdown()
    except StorageError as e:
        logger.warning("Error during storage backend shutdown", extra={"error": str(e)})
    else:
        logger.info("Storage backend shutdown complete")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifecycle.

    Args:
        app: FastAPI application instance.

    Yields:
        None during application runtime.
    """
    setup_logging(get_logging_settings())
    app_settings = get_app_settings()
    logger.info(
        "Starting application",
        extra={
            "service": app_settings.service_name,
            "version": app_settings.version,
            "environment": app_settings.environment,
        },
    )

    await _startup_storage(app)

    yield

    logger.info("Shutting down application")
    await _shutdown_storage(app)
