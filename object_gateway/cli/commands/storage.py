"""Object storage commands."""

import sys

import click

from object_gateway.cli.utils import coro, error, header, object_line, success
from object_gateway.core.settings import get_storage_settings
from object_gateway.infra.storage.backends import create_storage_backend
from object_gateway.infra.storage.exceptions import StorageError


@click.group(name="storage")
def storage() -> None:
    """S3-compatible object storage commands."""


@storage.command(name="list")
@click.option("--prefix", default="", help="Only list keys starting with this prefix")
@coro
async def list_objects(prefix: str) -> None:
    """List every object in the configured bucket."""
    settings = get_storage_settings()
    backend = create_storage_backend(settings)

    header(f"Objects in '{settings.bucket}'")
    count = 0
    try:
        await backend.startup()
        async for obj in backend.stream_objects(prefix=prefix):
            click.echo(object_line(obj))
            count += 1
    except StorageError as e:
        error(f"Failed to list objects: {e}")
        sys.exit(1)
    finally:
        await backend.shutdown()

    success(f"{count} object(s)")
