"""Host environment interfaces and the in-memory reference host.

Submodules:
    interfaces: SheetStore and ChatSink base classes.
    events: Sequential EventBus with queued redelivery.
    memory: InMemorySheetStore and ChatLog.
"""

from __future__ import annotations

from ammo_manager.host.events import EventBus, EventHandler
from ammo_manager.host.interfaces import ChatSink, SheetStore
from ammo_manager.host.memory import AttributeWrite, ChatEntry, ChatLog, InMemorySheetStore


__all__ = [
    "SheetStore",
    "ChatSink",
    "EventBus",
    "EventHandler",
    "InMemorySheetStore",
    "AttributeWrite",
    "ChatLog",
    "ChatEntry",
]
