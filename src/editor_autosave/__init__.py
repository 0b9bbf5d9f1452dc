"""Background auto-save and crash recovery for text editors."""

from editor_autosave.core.cleanup import CleanupAgent
from editor_autosave.core.conflict import ConflictDetector
from editor_autosave.core.coordinator import SaveCoordinator, SaveRegistry
from editor_autosave.core.paths import RecoveryPathResolver, resolve_recovery_path
from editor_autosave.core.scheduler import SaveScheduler
from editor_autosave.events import Event, EventBus
from editor_autosave.models import ConflictDecision, Resolution, SaveState
from editor_autosave.service import AutoSaveService, StatusLine

__all__ = [
    "AutoSaveService",
    "CleanupAgent",
    "ConflictDecision",
    "ConflictDetector",
    "Event",
    "EventBus",
    "RecoveryPathResolver",
    "Resolution",
    "SaveCoordinator",
    "SaveRegistry",
    "SaveScheduler",
    "SaveState",
    "StatusLine",
    "resolve_recovery_path",
]
