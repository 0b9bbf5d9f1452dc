"""In-memory documents and the set of documents open in an editor."""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class TextDocument:
    """A text buffer shadowing a canonical file."""

    path: str
    content: str = ""
    dirty: bool = False
    new_file: bool = False
    ephemeral: bool = False
    modified: float = 0.0

    @classmethod
    def from_file(cls, path: str | Path) -> "TextDocument":
        """Load a document from disk, capturing its modification time."""
        p = Path(path)
        return cls(
            path=str(p),
            content=p.read_text(encoding="utf-8"),
            modified=p.stat().st_mtime,
        )

    def is_dirty(self) -> bool:
        return self.dirty

    def is_new_file(self) -> bool:
        return self.new_file

    def is_ephemeral(self) -> bool:
        return self.ephemeral

    def last_modified(self) -> float:
        return self.modified

    def get_content(self) -> str:
        return self.content

    def set_content(self, content: str) -> None:
        self.content = content
        self.dirty = True

    def mark_saved(self, timestamp: float) -> None:
        """Record a successful canonical save."""
        self.dirty = False
        self.new_file = False
        self.modified = timestamp


class OpenDocuments:
    """Documents open in the editor, in opening order, plus the focused one."""

    def __init__(self) -> None:
        self._documents: dict[str, TextDocument] = {}
        self._active: str | None = None

    def open(self, document: TextDocument, *, focus: bool = True) -> None:
        self._documents[document.path] = document
        if focus:
            self._active = document.path

    def close(self, path: str) -> TextDocument | None:
        document = self._documents.pop(path, None)
        if self._active == path:
            self._active = None
        return document

    def focus(self, path: str) -> None:
        if path not in self._documents:
            msg = f"Document is not open: {path!r}"
            raise KeyError(msg)
        self._active = path

    def get(self, path: str) -> TextDocument | None:
        return self._documents.get(path)

    def open_documents(self) -> list[TextDocument]:
        return list(self._documents.values())

    def active_document(self) -> TextDocument | None:
        if self._active is None:
            return None
        return self._documents.get(self._active)
