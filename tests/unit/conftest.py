"""Shared test fixtures."""

import pytest

from editor_autosave.core.cleanup import CleanupAgent
from editor_autosave.core.coordinator import SaveCoordinator
from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.documents import TextDocument
from editor_autosave.events import EventBus
from tests.unit.fakes import FakeStorage


@pytest.fixture
def storage() -> FakeStorage:
    return FakeStorage()


@pytest.fixture
def resolver() -> RecoveryPathResolver:
    return RecoveryPathResolver()


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def coordinator(
    storage: FakeStorage, resolver: RecoveryPathResolver, events: EventBus
) -> SaveCoordinator:
    return SaveCoordinator(storage, resolver, events)


@pytest.fixture
def cleanup(storage: FakeStorage, resolver: RecoveryPathResolver) -> CleanupAgent:
    return CleanupAgent(storage, resolver)


@pytest.fixture
def dirty_doc() -> TextDocument:
    """An opened, edited document at /work/a.txt."""
    return TextDocument(path="/work/a.txt", content="hello", dirty=True, modified=100.0)
