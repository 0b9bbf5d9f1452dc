"""Fake implementations for testing the auto-save core."""

import asyncio

from editor_autosave.models import ConflictDecision, Resolution


class FakeStorage:
    """In-memory fake for LocalFileStorage.

    Writes can be held back with ``gate`` (an asyncio.Event) to simulate a
    slow disk, and any operation can be made to fail. Completed writes and
    deletes are recorded for assertions.
    """

    def __init__(self) -> None:
        self.files: dict[str, str] = {}
        self.mtimes: dict[str, float] = {}
        self.writes: list[tuple[str, str]] = []
        self.deletes: list[str] = []
        self.gate: asyncio.Event | None = None
        self.fail_writes = False
        self.fail_reads = False
        self.fail_deletes = False
        self.clock = 1000.0
        self.in_flight = 0
        self.max_in_flight = 0

    def add_file(self, path: str, content: str, *, mtime: float) -> None:
        """Place a file in storage with a given modification time."""
        self.files[path] = content
        self.mtimes[path] = mtime

    async def exists(self, path: str) -> bool:
        await asyncio.sleep(0)
        return path in self.files

    async def read_file(self, path: str) -> str:
        await asyncio.sleep(0)
        if self.fail_reads:
            raise OSError("read failed")
        if path not in self.files:
            raise FileNotFoundError(path)
        return self.files[path]

    async def write_file(self, path: str, content: str) -> None:
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if self.gate is not None:
                await self.gate.wait()
            else:
                await asyncio.sleep(0)
            if self.fail_writes:
                raise OSError("disk full")
            self.clock += 1
            self.files[path] = content
            self.mtimes[path] = self.clock
            self.writes.append((path, content))
        finally:
            self.in_flight -= 1

    async def delete_file(self, path: str) -> None:
        await asyncio.sleep(0)
        if self.fail_deletes:
            raise OSError("delete failed")
        self.deletes.append(path)
        self.files.pop(path, None)
        self.mtimes.pop(path, None)

    async def modified_time(self, path: str) -> float:
        await asyncio.sleep(0)
        if self.fail_reads:
            raise OSError("stat failed")
        return self.mtimes[path]


class FakePrompt:
    """Answer every restore prompt the same way and record what was asked."""

    def __init__(self, resolution: Resolution) -> None:
        self.resolution = resolution
        self.asked: list[ConflictDecision] = []

    async def choose(self, decision: ConflictDecision) -> Resolution:
        self.asked.append(decision)
        return self.resolution


async def settle(rounds: int = 10) -> None:
    """Let pending tasks run up to their next real suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)
