"""In-process event bus connecting the editor to the auto-save core."""

import inspect
from collections import defaultdict
from collections.abc import Awaitable, Callable
from enum import Enum

from loguru import logger

from editor_autosave.protocols import DocumentProtocol


class Event(Enum):
    """Events consumed and published by the auto-save core."""

    DOCUMENT_OPENED = "document_opened"
    DOCUMENT_EXPLICITLY_SAVED = "document_explicitly_saved"
    SAVE_STARTED = "save_started"
    SAVE_COMPLETED = "save_completed"


Handler = Callable[[DocumentProtocol], Awaitable[object] | object]


class EventBus:
    """Dispatch document events to subscribed handlers.

    Handlers run in subscription order. Coroutine handlers are awaited.
    A handler that raises is logged and skipped; the remaining handlers
    still run and the publisher never sees the exception.
    """

    def __init__(self) -> None:
        self._handlers: dict[Event, list[Handler]] = defaultdict(list)

    def subscribe(self, event: Event, handler: Handler) -> None:
        self._handlers[event].append(handler)

    def unsubscribe(self, event: Event, handler: Handler) -> None:
        """Remove a handler. Unknown handlers are ignored."""
        try:
            self._handlers[event].remove(handler)
        except ValueError:
            pass

    def handlers(self, event: Event) -> tuple[Handler, ...]:
        return tuple(self._handlers[event])

    async def publish(self, event: Event, document: DocumentProtocol) -> None:
        for handler in list(self._handlers[event]):
            try:
                result = handler(document)
                if inspect.isawaitable(result):
                    await result
            except Exception:
                logger.exception("Handler {!r} failed for {} on {}", handler, event.value, document.path)
