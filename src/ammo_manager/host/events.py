"""Sequential event bus standing in for the host dispatcher.

Events are queued and delivered one at a time, each to completion. An
event emitted while another is being handled (for example the change
event produced by a propagation write) is appended to the queue and
delivered afterwards as a new top-level invocation, never recursively.
"""

from __future__ import annotations

from collections import deque
from typing import Any, Callable

from ammo_manager.core.exceptions import DispatchError
from ammo_manager.core.logging import get_logger


logger = get_logger(__name__)

EventHandler = Callable[..., None]


class EventBus:
    """Single-threaded publish/subscribe queue.

    Example:
        >>> bus = EventBus()
        >>> seen = []
        >>> bus.on("ready", lambda: seen.append("ready"))
        >>> bus.emit("ready")
        >>> seen
        ['ready']
    """

    def __init__(self, *, max_events: int = 1000) -> None:
        """Initialize the bus.

        Args:
            max_events: Maximum deliveries in one drain before the bus
                reports a feedback loop.
        """
        self._handlers: dict[str, list[EventHandler]] = {}
        self._queue: deque[tuple[str, tuple[Any, ...]]] = deque()
        self._draining = False
        self.max_events = max_events
        self.delivered = 0

    def on(self, event_name: str, handler: EventHandler) -> None:
        """Subscribe ``handler`` to ``event_name``."""
        self._handlers.setdefault(event_name, []).append(handler)
        logger.debug("Handler subscribed", event_name=event_name, handler=_handler_name(handler))

    def handlers(self, event_name: str) -> list[EventHandler]:
        return list(self._handlers.get(event_name, []))

    def emit(self, event_name: str, *args: Any) -> None:
        """Queue an event and, unless already draining, deliver the queue.

        Raises:
            DispatchError: If more than ``max_events`` events are delivered
                in one drain. The remaining queue is discarded.
        """
        self._queue.append((event_name, args))
        if self._draining:
            return
        self._drain()

    def _drain(self) -> None:
        self._draining = True
        delivered = 0
        try:
            while self._queue:
                event_name, args = self._queue.popleft()
                delivered += 1
                if delivered > self.max_events:
                    self._queue.clear()
                    raise DispatchError(
                        "Event redelivery limit exceeded",
                        event_name=event_name,
                        delivered=delivered - 1,
                    )
                for handler in self.handlers(event_name):
                    handler(*args)
        finally:
            self._draining = False
            self.delivered += delivered


def _handler_name(handler: EventHandler) -> str:
    return getattr(handler, "__qualname__", repr(handler))


__all__ = [
    "EventHandler",
    "EventBus",
]
