"""CLI command groups."""

from .config import config
from .server import serve
from .storage import storage

__all__ = ["config", "serve", "storage"]
