"""Local staging of uploaded files.

Uploads are written to a staging directory before they are forwarded to the
object store. Each staged file gets a generated name, so concurrent uploads
of the same filename never collide, and it is removed when the
``staged_upload`` block exits, whether or not the forward succeeded.
"""

from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager
from dataclasses import dataclass
import logging
from pathlib import Path
import shutil
from typing import TYPE_CHECKING, BinaryIO
from uuid import uuid4

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StagedFile:
    """An upload copied to local disk.

    Attributes:
        filename: Original client-supplied filename
        path: Location of the staged copy
        size_bytes: Bytes written to the staged copy
    """

    filename: str
    path: Path
    size_bytes: int

    async def read(self) -> bytes:
        """Read the staged bytes without blocking the event loop."""
        return await asyncio.to_thread(self.path.read_bytes)


def _write_staged(source: BinaryIO, path: Path) -> int:
    path.parent.mkdir(parents=True, exist_ok=True)
    source.seek(0)
    with path.open("wb") as target:
        shutil.copyfileobj(source, target)
        return target.tell()


def _remove_staged(path: Path) -> None:
    path.unlink(missing_ok=True)


@asynccontextmanager
async def staged_upload(
    source: BinaryIO,
    filename: str,
    staging_dir: Path,
) -> AsyncIterator[StagedFile]:
    """Copy ``source`` into ``staging_dir`` for the duration of the block.

    Args:
        source: Readable binary stream of the upload
        filename: Original filename, carried through unchanged
        staging_dir: Directory for staged copies (created if missing)

    Yields:
        The staged file. Its path no longer exists once the block exits.
    """
    path = staging_dir / uuid4().hex
    try:
        size_bytes = await asyncio.to_thread(_write_staged, source, path)
        logger.debug(
            "Upload staged",
            extra={"key": filename, "path": str(path), "size_bytes": size_bytes},
        )
        yield StagedFile(filename=filename, path=path, size_bytes=size_bytes)
    finally:
        await asyncio.to_thread(_remove_staged, path)
