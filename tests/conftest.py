"""Pytest configuration and shared fixtures.

Organization:
    - Environment: settings isolation for every test
    - Storage Fixtures: in-memory backend and a mocked backend
    - Application Fixtures: FastAPI app and HTTP client
"""

from __future__ import annotations

from collections.abc import AsyncGenerator, AsyncIterator, Iterable
import os
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

from httpx import ASGITransport, AsyncClient
import pytest

from object_gateway.core.settings import clear_all_caches
from object_gateway.infra.storage.backends import InMemoryBackend

# Ensure tests run without external infrastructure
os.environ.setdefault("STORAGE_BACKEND", "memory")
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("LOG_JSON", "false")


# ============================================================================
# Environment
# ============================================================================


@pytest.fixture(autouse=True)
def _reset_settings_cache() -> Iterable[None]:
    """Every test reads settings fresh from its own environment."""
    clear_all_caches()
    yield
    clear_all_caches()


# ============================================================================
# Storage Fixtures
# ============================================================================


async def _no_objects(prefix: str = "") -> AsyncIterator:
    for obj in ():
        yield obj


@pytest.fixture
async def memory_backend() -> AsyncGenerator[InMemoryBackend]:
    """A started in-memory backend."""
    backend = InMemoryBackend(bucket="test-bucket")
    await backend.startup()
    yield backend
    await backend.shutdown()


@pytest.fixture
def mock_backend() -> AsyncMock:
    """A backend double that records every call."""
    backend = AsyncMock()
    backend.backend_name = "mock"
    backend.bucket = "test-bucket"
    backend.is_ready = True
    backend.stream_objects = MagicMock(side_effect=_no_objects)
    return backend


@pytest.fixture
def staging_dir(tmp_path: Path) -> Path:
    """Per-test staging directory."""
    return tmp_path / "staging"


# ============================================================================
# Application Fixtures
# ============================================================================


def _build_app(backend, staging_dir: Path):
    from object_gateway.app.main import create_app
    from object_gateway.features.files.dependencies import get_staging_dir

    app = create_app(storage_backend=backend)
    app.dependency_overrides[get_staging_dir] = lambda: staging_dir
    return app


@pytest.fixture
async def client(
    memory_backend: InMemoryBackend, staging_dir: Path
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against an app served from the in-memory backend."""
    app = _build_app(memory_backend, staging_dir)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def mock_client(
    mock_backend: AsyncMock, staging_dir: Path
) -> AsyncGenerator[AsyncClient]:
    """HTTP client against an app served from the mocked backend."""
    app = _build_app(mock_backend, staging_dir)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
