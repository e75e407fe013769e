"""Bridge between click's synchronous commands and the async storage API."""

import asyncio
from collections.abc import Awaitable, Callable
from functools import wraps


def coro[T](f: Callable[..., Awaitable[T]]) -> Callable[..., T]:
    """Run an async click command to completion on a fresh event loop.

    Place it below the click decorators so click sees a plain function:

        @storage.command(name="list")
        @click.option("--prefix", default="")
        @coro
        async def list_objects(prefix: str) -> None:
            async for obj in backend.stream_objects(prefix=prefix):
                click.echo(object_line(obj))
    """

    @wraps(f)
    def run(*args, **kwargs) -> T:
        return asyncio.run(f(*args, **kwargs))

    return run
