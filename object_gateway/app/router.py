"""Router registry and setup."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from object_gateway.features.files.router import router as files_router
from object_gateway.features.status.router import router as status_router

if TYPE_CHECKING:
    from fastapi import FastAPI

logger = logging.getLogger(__name__)


def setup_routers(app: FastAPI) -> None:
    """Register all feature routers with the application.

    Routes are mounted at the root; the gateway has no API prefix.
    """
    app.include_router(status_router)
    app.include_router(files_router)
    logger.debug("Routers registered", extra={"routes": len(app.routes)})
