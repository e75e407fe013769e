"""Main CLI entry point for object-gateway management commands."""

import click

from object_gateway import __version__
from object_gateway.cli.commands import config, serve, storage


@click.group()
@click.version_option(version=__version__, prog_name="object-gateway")
def cli() -> None:
    """Object Gateway CLI.

    \b
    Commands:
      serve      Run the HTTP server
      config     Inspect effective configuration
      storage    Inspect the configured bucket
    """


cli.add_command(serve)
cli.add_command(config)
cli.add_command(storage)


if __name__ == "__main__":
    cli()
