"""Per-document save coordination: eligibility, serialization, follow-ups."""

from dataclasses import dataclass, field

from loguru import logger

from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.events import Event, EventBus
from editor_autosave.models import SaveState
from editor_autosave.protocols import DocumentProtocol, StorageProtocol


@dataclass
class SaveRegistry:
    """Save state and pending requests, keyed by canonical path.

    Only touched from the event loop thread, so no locking.
    """

    states: dict[str, SaveState] = field(default_factory=dict)
    pending: dict[str, DocumentProtocol] = field(default_factory=dict)

    def state(self, path: str) -> SaveState:
        return self.states.get(path, SaveState.IDLE)

    def mark_saving(self, path: str) -> None:
        self.states[path] = SaveState.SAVING

    def mark_idle(self, path: str) -> None:
        # Idle is the default, so forget the entry instead of storing it.
        self.states.pop(path, None)

    def set_pending(self, document: DocumentProtocol) -> None:
        self.pending[document.path] = document

    def pop_pending(self, path: str) -> DocumentProtocol | None:
        return self.pending.pop(path, None)


class SaveCoordinator:
    """Write recovery snapshots, never more than one at a time per document.

    A request arriving while the document is being saved is parked as the
    document's pending request. Any number of such requests collapse into
    one follow-up save, started once the in-flight write completes.
    """

    def __init__(
        self,
        storage: StorageProtocol,
        resolver: RecoveryPathResolver,
        events: EventBus,
        registry: SaveRegistry | None = None,
    ) -> None:
        self._storage = storage
        self._resolver = resolver
        self._events = events
        self.registry = registry if registry is not None else SaveRegistry()

    def is_saving(self, document: DocumentProtocol) -> bool:
        return self.registry.state(document.path) is SaveState.SAVING

    def has_pending(self, document: DocumentProtocol) -> bool:
        return document.path in self.registry.pending

    def _skip_reason(self, document: DocumentProtocol) -> str | None:
        if not document.is_dirty():
            return "no unsaved changes"
        if document.is_new_file():
            # Never-persisted documents have no canonical path to shadow yet.
            return "new file"
        if document.is_ephemeral():
            return "ephemeral document"
        return None

    async def attempt_save(self, document: DocumentProtocol) -> bool:
        """Save document to its recovery artifact if it needs it.

        Returns:
            True if this call wrote a snapshot (follow-ups included),
            False if it was skipped, parked or failed.
        """
        reason = self._skip_reason(document)
        if reason is not None:
            logger.debug("Skipping auto-save of {}: {}", document.path, reason)
            return False

        path = document.path
        if self.registry.state(path) is SaveState.SAVING:
            logger.debug("Save of {} in progress, queueing another", path)
            self.registry.set_pending(document)
            return False

        recovery_path = self._resolver.resolve(path)
        # State and content are taken before the first await.
        self.registry.mark_saving(path)
        written = False
        try:
            content = document.get_content()
            await self._events.publish(Event.SAVE_STARTED, document)
            await self._storage.write_file(recovery_path, content)
            written = True
        except Exception as e:
            logger.warning("Auto-save of {} to {} failed: {}", path, recovery_path, e)
            return False
        finally:
            # Released even on cancellation, so the document never stays locked.
            self.registry.mark_idle(path)
            if not written:
                self.registry.pop_pending(path)

        logger.debug("Auto-saved {} ({} chars)", recovery_path, len(content))
        await self._events.publish(Event.SAVE_COMPLETED, document)

        follow_up = self.registry.pop_pending(path)
        if follow_up is not None:
            await self.attempt_save(follow_up)
        return True
