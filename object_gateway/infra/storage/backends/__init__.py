"""Storage backends package.

Provides protocol-based abstraction over the object store.
"""

from object_gateway.core.settings.storage import StorageBackendType

from .factory import create_storage_backend
from .memory import InMemoryBackend
from .protocol import ObjectMetadata, StorageBackend, UploadResult

__all__ = [
    "InMemoryBackend",
    "ObjectMetadata",
    "StorageBackend",
    "StorageBackendType",
    "UploadResult",
    "create_storage_backend",
]
