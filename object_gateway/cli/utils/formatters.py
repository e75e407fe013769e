"""Console output for the object-gateway CLI.

Status lines are coloured with ``click.secho``. Errors go to stderr.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

if TYPE_CHECKING:
    from object_gateway.infra.storage.backends.protocol import ObjectMetadata


def success(message: str) -> None:
    click.secho(f"✓ {message}", fg="green")


def error(message: str) -> None:
    click.secho(f"✗ {message}", fg="red", err=True)


def info(message: str) -> None:
    click.secho(f"ℹ {message}", fg="blue")


def header(message: str) -> None:
    """Section title, preceded by a blank line."""
    click.secho(f"\n{message}", fg="cyan", bold=True)


def object_line(obj: ObjectMetadata) -> str:
    """One listing row: timestamp, right-aligned size, key.

    Fields the store did not report are shown as ``-``.
    """
    modified = obj.last_modified.isoformat() if obj.last_modified else "-"
    size = "-" if obj.size_bytes is None else str(obj.size_bytes)
    return f"{modified:<32}  {size:>12}  {obj.key}"
