"""S3-compatible storage backend."""

from .backend import S3Backend

__all__ = ["S3Backend"]
