"""Naming of recovery artifacts."""

import os

from editor_autosave.config import RECOVERY_SUFFIX


def resolve_recovery_path(path: str, suffix: str = RECOVERY_SUFFIX) -> str:
    """Return the recovery artifact path for a canonical document path.

    >>> resolve_recovery_path("/work/a.txt")
    '/work/a.txt.swp'
    """
    return f"{path}.{suffix}"


class RecoveryPathResolver:
    """The one place that decides where a document's recovery artifact lives.

    Coordinator, conflict detector and cleanup agent all share one resolver
    so they can never disagree on naming.
    """

    def __init__(self, suffix: str = RECOVERY_SUFFIX) -> None:
        if not suffix:
            msg = "Recovery suffix must not be empty"
            raise ValueError(msg)
        if os.sep in suffix or (os.altsep and os.altsep in suffix):
            msg = f"Recovery suffix must not contain a path separator: {suffix!r}"
            raise ValueError(msg)
        self.suffix = suffix

    def resolve(self, path: str) -> str:
        return resolve_recovery_path(path, self.suffix)

    def is_recovery_path(self, path: str) -> bool:
        return path.endswith("." + self.suffix)
