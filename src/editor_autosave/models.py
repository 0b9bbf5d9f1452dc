"""Domain models for auto-save coordination."""

from dataclasses import dataclass
from enum import Enum

from editor_autosave.protocols import DocumentProtocol


class SaveState(Enum):
    """Per-document save state. Only lives while the process runs."""

    IDLE = "idle"
    SAVING = "saving"


class Resolution(Enum):
    """Answer to a restore prompt."""

    ACCEPT = "accept"
    DECLINE = "decline"


@dataclass(frozen=True)
class ConflictDecision:
    """A recovery artifact newer than the canonical file it shadows."""

    content: str
    recovery_path: str
    document: DocumentProtocol
