"""Configuration constants and sources for editor-autosave."""

import os
from dataclasses import dataclass

# Recovery artifacts live next to the canonical file: "<path>.<suffix>".
RECOVERY_SUFFIX: str = "swp"

# Seconds between two auto-save ticks.
AUTO_SAVE_INTERVAL: float = 5 * 60

# Environment switch read by EnvironmentConfig. Unset means enabled.
ENABLED_ENV_VAR: str = "EDITOR_AUTOSAVE_ENABLED"

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass
class StaticConfig:
    """In-process settings toggle, flipped by whatever owns the settings UI."""

    enabled: bool = True

    def is_auto_save_enabled(self) -> bool:
        return self.enabled


class EnvironmentConfig:
    """Read the auto-save switch from the environment on every call."""

    def __init__(self, var: str = ENABLED_ENV_VAR) -> None:
        self.var = var

    def is_auto_save_enabled(self) -> bool:
        raw = os.environ.get(self.var)
        if raw is None:
            return True
        return raw.strip().lower() in _TRUTHY
