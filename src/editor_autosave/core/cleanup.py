"""Removal of recovery artifacts that are no longer needed."""

from loguru import logger

from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.protocols import DocumentProtocol, StorageProtocol


class CleanupAgent:
    """Delete recovery artifacts after an explicit save or a declined restore."""

    def __init__(self, storage: StorageProtocol, resolver: RecoveryPathResolver) -> None:
        self._storage = storage
        self._resolver = resolver

    async def remove_artifact(self, path: str) -> bool:
        """Delete path if it exists.

        Returns:
            True if an artifact was deleted, False if there was none or the
            storage refused.
        """
        try:
            if not await self._storage.exists(path):
                return False
            await self._storage.delete_file(path)
        except Exception as e:
            logger.warning("Could not remove recovery file {}: {}", path, e)
            return False
        logger.debug("Removed recovery file {}", path)
        return True

    async def on_explicit_save(self, document: DocumentProtocol) -> bool:
        """Drop the artifact of a document the user just saved on purpose."""
        return await self.remove_artifact(self._resolver.resolve(document.path))
