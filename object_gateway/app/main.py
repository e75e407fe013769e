"""FastAPI application factory."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import FastAPI

from object_gateway.app.exception_handlers import configure_exception_handlers
from object_gateway.app.lifespan import lifespan
from object_gateway.app.router import setup_routers
from object_gateway.core.settings import get_app_settings

if TYPE_CHECKING:
    from object_gateway.infra.storage.backends.protocol import StorageBackend


def create_app(storage_backend: StorageBackend | None = None) -> FastAPI:
    """Create and configure FastAPI application.

    Args:
        storage_backend: Backend to serve from instead of the one selected by
            settings. The lifespan still starts and stops it.

    Returns:
        Configured FastAPI application instance.
    """
    app_settings = get_app_settings()

    app = FastAPI(
        title=app_settings.title,
        version=app_settings.version,
        debug=app_settings.debug,
        docs_url="/docs" if app_settings.docs_enabled else None,
        redoc_url=None,
        openapi_url="/openapi.json" if app_settings.docs_enabled else None,
        lifespan=lifespan,
    )

    if storage_backend is not None:
        app.state.storage_backend = storage_backend

    # Exception handlers first so router errors are rendered consistently
    configure_exception_handlers(app)
    setup_routers(app)

    return app


# Application instance for uvicorn
app = create_app()
