"""Protocols for the collaborators the auto-save core depends on."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from editor_autosave.models import ConflictDecision, Resolution


@runtime_checkable
class StorageProtocol(Protocol):
    """Protocol for asynchronous file storage."""

    async def exists(self, path: str) -> bool:
        """Return True if something is stored at path."""
        ...

    async def read_file(self, path: str) -> str:
        """Return the file contents. Raises FileNotFoundError if absent."""
        ...

    async def write_file(self, path: str, content: str) -> None:
        """Create or overwrite path. Raises on failure."""
        ...

    async def delete_file(self, path: str) -> None:
        """Delete path. A missing file is not an error."""
        ...

    async def modified_time(self, path: str) -> float:
        """Return the last-modified time of path in epoch seconds."""
        ...


@runtime_checkable
class DocumentProtocol(Protocol):
    """Protocol for an open document owned by the editing surface."""

    @property
    def path(self) -> str:
        """Canonical path of the document."""
        ...

    def is_dirty(self) -> bool: ...

    def is_new_file(self) -> bool: ...

    def is_ephemeral(self) -> bool: ...

    def last_modified(self) -> float:
        """Modification time of the canonical file when it was opened."""
        ...

    def get_content(self) -> str: ...

    def set_content(self, content: str) -> None: ...


@runtime_checkable
class DocumentSetProtocol(Protocol):
    """Protocol for the set of documents open in the editor."""

    def open_documents(self) -> list[DocumentProtocol]: ...

    def active_document(self) -> DocumentProtocol | None: ...


@runtime_checkable
class ConfigProtocol(Protocol):
    """Protocol for the auto-save settings source."""

    def is_auto_save_enabled(self) -> bool: ...


@runtime_checkable
class ConflictPromptProtocol(Protocol):
    """Protocol for asking the user whether to restore a recovery artifact."""

    async def choose(self, decision: "ConflictDecision") -> "Resolution":
        """Present the decision and return exactly one resolution."""
        ...
