"""Application wiring.

Builds the sync components for a host and subscribes the two handlers to
its event bus. The handlers share no state: each invocation re-reads
everything it needs from the store.

Example:
    >>> bus = EventBus()
    >>> store = InMemorySheetStore(bus=bus)
    >>> manager = AmmoManager(store, ChatLog())
    >>> manager.install(bus)
    >>> bus.emit("ready")
"""

from __future__ import annotations

from ammo_manager.core.config import Settings, get_settings
from ammo_manager.core.logging import configure_logging, get_logger
from ammo_manager.host.events import EventBus
from ammo_manager.host.interfaces import ChatSink, SheetStore
from ammo_manager.host.memory import ChatLog, InMemorySheetStore
from ammo_manager.models.enums import EventName
from ammo_manager.sync.handlers import AttributeChangeHandler, RollHandler
from ammo_manager.sync.locator import ItemLocator
from ammo_manager.sync.notifications import Notifier
from ammo_manager.sync.reconciler import Reconciler


logger = get_logger(__name__)


class AmmoManager:
    """The ammo manager for one host.

    Attributes:
        roll_handler: Reacts to attack and damage roll messages.
        change_handler: Reacts to attribute changes.
    """

    def __init__(
        self,
        store: SheetStore,
        chat: ChatSink,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.store = store
        self.notifier = Notifier(chat, self.settings.notify)
        self.locator = ItemLocator(self.notifier, self.settings.sheet)
        self.reconciler = Reconciler(self.locator, self.settings.sheet)
        self.roll_handler = RollHandler(
            store,
            self.locator,
            self.reconciler,
            self.notifier,
            self.settings,
        )
        self.change_handler = AttributeChangeHandler(store, self.reconciler, self.settings)

    def install(self, bus: EventBus) -> None:
        """Subscribe the handlers to the host's events."""
        bus.on(EventName.READY, self.on_ready)
        bus.on(EventName.CHAT_MESSAGE, self.roll_handler)
        bus.on(EventName.CHANGE_ATTRIBUTE, self.change_handler)

    def on_ready(self) -> None:
        logger.info(
            "Ammo manager initialized",
            name=self.settings.app_name,
            version=self.settings.app_version,
        )


def create_reference_host(
    settings: Settings | None = None,
    *,
    configure_logs: bool = False,
) -> tuple[EventBus, InMemorySheetStore, ChatLog, AmmoManager]:
    """Wire an in-memory store and chat log to a new manager.

    Args:
        settings: Application settings, defaults to the cached settings.
        configure_logs: Configure structlog from the settings' log level
            and format first.

    Returns:
        The bus, store, chat log and installed manager.
    """
    settings = settings or get_settings()
    if configure_logs:
        configure_logging(level=settings.log_level, json_format=settings.json_logs)
    bus = EventBus(max_events=settings.dispatch.max_events)
    store = InMemorySheetStore(bus=bus, sheet_settings=settings.sheet)
    chat = ChatLog()
    manager = AmmoManager(store, chat, settings)
    manager.install(bus)
    return bus, store, chat, manager


__all__ = [
    "AmmoManager",
    "create_reference_host",
]
