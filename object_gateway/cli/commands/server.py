"""Server commands."""

import click
import uvicorn

from object_gateway.cli.utils import info
from object_gateway.core.settings import get_app_settings, get_logging_settings
from object_gateway.infra.logging import setup_logging


@click.command(name="serve")
@click.option(
    "--host",
    default=None,
    help="Host to bind (default: APP_HOST or 0.0.0.0)",
)
@click.option(
    "--port",
    default=None,
    type=int,
    help="Port to bind (default: APP_PORT/PORT or 3000)",
)
@click.option(
    "--reload/--no-reload",
    default=False,
    help="Enable auto-reload on code changes",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Run the gateway HTTP server."""
    settings = get_app_settings()
    host = host or settings.host
    port = port or settings.port

    setup_logging(get_logging_settings())
    info(f"Server running on http://{host}:{port}")

    uvicorn.run(
        "object_gateway.app.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
    )
