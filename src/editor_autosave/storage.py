"""Local filesystem storage for recovery artifacts."""

import asyncio
import os
import tempfile
from pathlib import Path


def _write_atomic(path: Path, content: str) -> None:
    """Write to a sibling temp file, then rename it over path."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class LocalFileStorage:
    """Asynchronous storage backed by the local filesystem.

    Blocking calls run in the default executor so the event loop keeps
    serving other documents while a write is outstanding.
    """

    async def exists(self, path: str) -> bool:
        return await asyncio.to_thread(Path(path).is_file)

    async def read_file(self, path: str) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")

    async def write_file(self, path: str, content: str) -> None:
        await asyncio.to_thread(_write_atomic, Path(path), content)

    async def delete_file(self, path: str) -> None:
        await asyncio.to_thread(Path(path).unlink, missing_ok=True)

    async def modified_time(self, path: str) -> float:
        stat = await asyncio.to_thread(Path(path).stat)
        return stat.st_mtime
