"""Detect recovery artifacts newer than the document being opened."""

from loguru import logger

from editor_autosave.core.cleanup import CleanupAgent
from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.models import ConflictDecision, Resolution
from editor_autosave.protocols import ConflictPromptProtocol, DocumentProtocol, StorageProtocol


class ConflictDetector:
    """Offer to restore unsaved work when a document is opened.

    Detection is best effort: an artifact that cannot be inspected or read
    is treated as no conflict. A stale artifact (not newer than the
    canonical file) is left where it is.
    """

    def __init__(
        self,
        storage: StorageProtocol,
        resolver: RecoveryPathResolver,
        cleanup: CleanupAgent,
        prompt: ConflictPromptProtocol | None = None,
    ) -> None:
        self._storage = storage
        self._resolver = resolver
        self._cleanup = cleanup
        self._prompt = prompt
        # Raised but unresolved decisions, keyed by canonical path.
        self._outstanding: dict[str, ConflictDecision] = {}

    def outstanding(self, path: str) -> ConflictDecision | None:
        return self._outstanding.get(path)

    async def check_on_open(self, document: DocumentProtocol) -> ConflictDecision | None:
        """Return a decision if a newer recovery artifact exists for document."""
        recovery_path = self._resolver.resolve(document.path)
        try:
            if not await self._storage.exists(recovery_path):
                return None
            artifact_time = await self._storage.modified_time(recovery_path)
            if artifact_time <= document.last_modified():
                logger.debug("Ignoring stale recovery file {}", recovery_path)
                return None
            content = await self._storage.read_file(recovery_path)
        except Exception as e:
            logger.warning("Could not inspect recovery file {}: {}", recovery_path, e)
            return None

        logger.info("Found unsaved changes for {} in {}", document.path, recovery_path)
        decision = ConflictDecision(content=content, recovery_path=recovery_path, document=document)
        self._outstanding[document.path] = decision
        return decision

    async def resolve(self, decision: ConflictDecision, resolution: Resolution) -> bool:
        """Apply the user's answer to a decision.

        Accepting loads the recovered text into the document and keeps the
        artifact until the next explicit save. Declining deletes the
        artifact, so the user is not asked again for it.

        Returns:
            False if the decision was already resolved.
        """
        path = decision.document.path
        if self._outstanding.get(path) is not decision:
            logger.debug("Decision for {} already resolved", path)
            return False
        del self._outstanding[path]

        if resolution is Resolution.ACCEPT:
            decision.document.set_content(decision.content)
            logger.info("Restored unsaved changes into {}", path)
        else:
            await self._cleanup.remove_artifact(decision.recovery_path)
            logger.info("Discarded recovery file {}", decision.recovery_path)
        return True

    async def handle_open(self, document: DocumentProtocol) -> Resolution | None:
        """Check a freshly opened document and ask the user if needed."""
        decision = await self.check_on_open(document)
        if decision is None or self._prompt is None:
            return None
        try:
            resolution = await self._prompt.choose(decision)
        except Exception:
            if self._outstanding.get(document.path) is decision:
                del self._outstanding[document.path]
            raise
        await self.resolve(decision, resolution)
        return resolution
