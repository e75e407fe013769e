"""Helpers shared by the CLI commands."""

from object_gateway.cli.utils.async_runner import coro
from object_gateway.cli.utils.formatters import error, header, info, object_line, success

__all__ = [
    "coro",
    "error",
    "header",
    "info",
    "object_line",
    "success",
]
