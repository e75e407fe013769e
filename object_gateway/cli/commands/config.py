"""Configuration inspection commands."""

import json

import click

from object_gateway.cli.utils import header
from object_gateway.core.settings import (
    get_app_settings,
    get_logging_settings,
    get_storage_settings,
)


@click.group(name="config")
def config() -> None:
    """Configuration management commands."""


@config.command(name="show")
def show() -> None:
    """Print the effective settings. Secrets are masked."""
    sections = {
        "app": get_app_settings(),
        "storage": get_storage_settings(),
        "logging": get_logging_settings(),
    }
    for name, settings in sections.items():
        header(name)
        click.echo(json.dumps(settings.model_dump(mode="json"), indent=2))
