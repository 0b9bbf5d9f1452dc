"""Periodic and manual triggering of auto-saves."""

import asyncio

from loguru import logger

from editor_autosave.config import AUTO_SAVE_INTERVAL
from editor_autosave.core.coordinator import SaveCoordinator
from editor_autosave.protocols import ConfigProtocol, DocumentProtocol, DocumentSetProtocol


class SaveScheduler:
    """Fire auto-save attempts for every open document on a fixed interval.

    A tick does not wait for the saves it starts. A slow save from one tick
    may still be running when the next tick fires; the coordinator's
    per-document serialization keeps that safe.
    """

    def __init__(
        self,
        coordinator: SaveCoordinator,
        documents: DocumentSetProtocol,
        config: ConfigProtocol,
        *,
        interval: float = AUTO_SAVE_INTERVAL,
    ) -> None:
        self._coordinator = coordinator
        self._documents = documents
        self._config = config
        self.interval = interval
        self._timer: asyncio.Task[None] | None = None
        self._in_flight: set[asyncio.Task[bool]] = set()

    @property
    def running(self) -> bool:
        return self._timer is not None and not self._timer.done()

    def start(self, interval: float | None = None) -> None:
        """Start ticking. Must be called from a running event loop."""
        if self.running:
            return
        if interval is not None:
            self.interval = interval
        if self.interval <= 0:
            msg = f"Auto-save interval must be positive, got {self.interval!r}"
            raise ValueError(msg)
        self._timer = asyncio.get_running_loop().create_task(self._run())
        logger.debug("Auto-save scheduler started, every {}s", self.interval)

    def stop(self) -> None:
        """Stop ticking. Saves already running are left to finish."""
        if self._timer is None:
            return
        self._timer.cancel()
        self._timer = None
        logger.debug("Auto-save scheduler stopped")

    async def _run(self) -> None:
        while True:
            await asyncio.sleep(self.interval)
            try:
                self.tick()
            except Exception:
                logger.opt(exception=True).warning("Auto-save tick failed, trying again next tick")

    def tick(self) -> int:
        """Start a save attempt for each open document.

        The enabled flag is read on every tick so a settings change takes
        effect without a restart.

        Returns:
            Number of save attempts started.
        """
        if not self._config.is_auto_save_enabled():
            logger.debug("Auto-save disabled, skipping tick")
            return 0
        documents = self._documents.open_documents()
        for document in documents:
            self._spawn(document)
        return len(documents)

    def save_now(self, document: DocumentProtocol | None = None) -> asyncio.Task[bool] | None:
        """Save one document right away, the focused one by default."""
        if document is None:
            document = self._documents.active_document()
        if document is None:
            return None
        return self._spawn(document)

    def _spawn(self, document: DocumentProtocol) -> asyncio.Task[bool]:
        task = asyncio.get_running_loop().create_task(self._coordinator.attempt_save(document))
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def drain(self) -> None:
        """Wait for every save this scheduler started to finish."""
        while self._in_flight:
            await asyncio.gather(*list(self._in_flight), return_exceptions=True)
