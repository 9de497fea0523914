"""Application bootstrap and lifecycle management."""

import threading
from typing import Protocol

from .channel import EventChannel, EventSource
from .config import Settings
from .dice import DiceThrow
from .logging_config import get_logger
from .sinks import DebugSink, LoggingSink, RecentEventsSink

logger = get_logger(__name__)


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Reset the running roll total."""
        ...


class Application:
    """Main application bootstrap."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or Settings.from_env()

        # Components (will be initialized in start())
        self._channel: EventChannel | None = None
        self._debug_sink: DebugSink | None = None
        self._logging_sink: LoggingSink | None = None
        self._recent_sink: RecentEventsSink | None = None
        self._source: EventSource | None = None
        self._dice: DiceThrow | None = None

        self._roll_lock = threading.Lock()
        self._roll_total = 0

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")
        source_name = self._settings.source_name

        # 1. Channel (no dependencies)
        self._channel = EventChannel()

        # 2. Sinks (depend on Channel)
        if self._settings.debug_sink_enabled:
            self._debug_sink = DebugSink(self._channel, source_name)
            self._channel.add_source_observer(self._debug_sink)
        self._logging_sink = LoggingSink()
        self._channel.register_listener(source_name, self._logging_sink)
        self._recent_sink = RecentEventsSink(self._settings.recent_capacity)
        self._channel.register_listener(source_name, self._recent_sink)

        # 3. Source (DebugSink enables itself on creation)
        self._source = self._channel.create_source(source_name)

        # 4. Producer (depends on Source)
        self._dice = DiceThrow(self._source, batch_size=self._settings.batch_size)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        self._dice = None
        self._source = None
        if self._channel is not None:
            self._channel.close()
        logger.info("Application stopped")

    async def reset(self) -> None:
        """Reset the running roll total and the recent-events buffer."""
        with self._roll_lock:
            self._roll_total = 0
        if self._recent_sink is not None:
            self._recent_sink.clear()
        logger.info("Reset complete")

    def roll_many(self, count: int) -> int:
        """Throw the dice count times and add the sum to the running total."""
        dice = self.dice
        rolled = sum(dice.get_dice_throw().total for _ in range(count))
        with self._roll_lock:
            self._roll_total += rolled
            return self._roll_total

    @property
    def roll_total(self) -> int:
        return self._roll_total

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def channel(self) -> EventChannel:
        """Get event channel instance."""
        if self._channel is None:
            raise RuntimeError("Application not started")
        return self._channel

    @property
    def source(self) -> EventSource:
        """Get the application's event source."""
        if self._source is None:
            raise RuntimeError("Application not started")
        return self._source

    @property
    def dice(self) -> DiceThrow:
        """Get dice producer instance."""
        if self._dice is None:
            raise RuntimeError("Application not started")
        return self._dice

    @property
    def recent_events(self) -> RecentEventsSink:
        """Get recent events buffer."""
        if self._recent_sink is None:
            raise RuntimeError("Application not started")
        return self._recent_sink
