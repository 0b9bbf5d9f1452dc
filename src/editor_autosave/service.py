"""Wire the auto-save components to an editor's event bus."""

import asyncio

from loguru import logger

from editor_autosave.config import AUTO_SAVE_INTERVAL, RECOVERY_SUFFIX
from editor_autosave.core.cleanup import CleanupAgent
from editor_autosave.core.conflict import ConflictDetector
from editor_autosave.core.coordinator import SaveCoordinator
from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.core.scheduler import SaveScheduler
from editor_autosave.events import Event, EventBus
from editor_autosave.protocols import (
    ConfigProtocol,
    ConflictPromptProtocol,
    DocumentProtocol,
    DocumentSetProtocol,
    StorageProtocol,
)


class StatusLine:
    """Keep a status-bar caption in sync with save notifications."""

    def __init__(self, events: EventBus) -> None:
        self.caption = ""
        self._events = events
        events.subscribe(Event.SAVE_STARTED, self.on_save_started)
        events.subscribe(Event.SAVE_COMPLETED, self.on_save_completed)

    def on_save_started(self, document: DocumentProtocol) -> None:
        self.caption = f"Saving file {document.path}"
        logger.debug(self.caption)

    def on_save_completed(self, document: DocumentProtocol) -> None:
        self.caption = f"Auto-saved file {document.path}"
        logger.debug(self.caption)

    def detach(self) -> None:
        self._events.unsubscribe(Event.SAVE_STARTED, self.on_save_started)
        self._events.unsubscribe(Event.SAVE_COMPLETED, self.on_save_completed)


class AutoSaveService:
    """Auto-save and crash recovery for one editor session.

    Listens for document opens (to offer restores) and explicit saves (to
    drop recovery files), and periodically snapshots dirty documents.
    """

    def __init__(
        self,
        storage: StorageProtocol,
        documents: DocumentSetProtocol,
        config: ConfigProtocol,
        *,
        events: EventBus | None = None,
        prompt: ConflictPromptProtocol | None = None,
        suffix: str = RECOVERY_SUFFIX,
        interval: float = AUTO_SAVE_INTERVAL,
    ) -> None:
        self.events = events if events is not None else EventBus()
        self.resolver = RecoveryPathResolver(suffix)
        self.cleanup = CleanupAgent(storage, self.resolver)
        self.coordinator = SaveCoordinator(storage, self.resolver, self.events)
        self.scheduler = SaveScheduler(self.coordinator, documents, config, interval=interval)
        self.detector = ConflictDetector(storage, self.resolver, self.cleanup, prompt)
        self._subscribed = False

    def start(self) -> None:
        """Subscribe to editor events and start the periodic timer."""
        if not self._subscribed:
            self.events.subscribe(Event.DOCUMENT_OPENED, self.detector.handle_open)
            self.events.subscribe(Event.DOCUMENT_EXPLICITLY_SAVED, self.cleanup.on_explicit_save)
            self._subscribed = True
        self.scheduler.start()
        logger.info("Auto-save started (every {}s, suffix .{})", self.scheduler.interval, self.resolver.suffix)

    async def stop(self, *, drain: bool = True) -> None:
        """Stop the timer and unsubscribe; optionally wait for running saves."""
        self.scheduler.stop()
        if self._subscribed:
            self.events.unsubscribe(Event.DOCUMENT_OPENED, self.detector.handle_open)
            self.events.unsubscribe(Event.DOCUMENT_EXPLICITLY_SAVED, self.cleanup.on_explicit_save)
            self._subscribed = False
        if drain:
            await self.scheduler.drain()
        logger.info("Auto-save stopped")

    def save_now(self, document: DocumentProtocol | None = None) -> asyncio.Task[bool] | None:
        return self.scheduler.save_now(document)
