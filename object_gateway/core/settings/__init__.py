"""Modular Pydantic Settings v2 configuration.

One frozen settings model per domain, each read from the environment (and an
optional ``.env`` file) exactly once through an LRU-cached loader:

    from object_gateway.core.settings import get_storage_settings

    settings = get_storage_settings()
    print(settings.bucket)

Configuration precedence (highest to lowest):
    1. init kwargs (testing/overrides)
    2. Environment variables
    3. .env file
"""

from __future__ import annotations

from .app import AppSettings
from .loader import (
    clear_all_caches,
    get_app_settings,
    get_logging_settings,
    get_storage_settings,
)
from .logs import LoggingSettings
from .storage import StorageBackendType, StorageSettings

__all__ = [
    "AppSettings",
    "LoggingSettings",
    "StorageBackendType",
    "StorageSettings",
    "clear_all_caches",
    "get_app_settings",
    "get_logging_settings",
    "get_storage_settings",
]
