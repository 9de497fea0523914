"""EventChannel implementation for structured event fan-out."""

import threading
import uuid
from dataclasses import dataclass, field
from typing import Protocol

from ..logging_config import get_logger
from ..models import EventKeywords, EventLevel, EventRecord
from .source import EventSource

logger = get_logger(__name__)


class IEventListener(Protocol):
    """Consumer of published records."""

    def matches(self, source_name: str, level: EventLevel) -> bool:
        """Whether the listener wants records of this source and level."""
        ...

    def on_event(self, record: EventRecord) -> None:
        """Handle one record."""
        ...


class ISourceObserver(Protocol):
    """Gets told about every source created on a channel."""

    def on_source_created(self, source: EventSource) -> None:
        """Called once per source, including sources created earlier."""
        ...


class IEventChannel(Protocol):
    """Named event sources fanned out to registered listeners."""

    def publish(
        self,
        source_name: str,
        level: EventLevel,
        message: str,
        keywords: EventKeywords = EventKeywords.NONE,
        exception_detail: str | None = None,
    ) -> None:
        """Deliver a record to every interested listener. Never raises."""
        ...

    def register_listener(
        self,
        source_name: str,
        listener: IEventListener,
        level_threshold: EventLevel = EventLevel.LOG_ALWAYS,
        keywords: EventKeywords = EventKeywords.ALL,
    ) -> "RegistrationHandle":
        """Subscribe a listener to a source."""
        ...

    def unregister_listener(self, handle: "RegistrationHandle") -> None:
        """Remove a subscription. Idempotent."""
        ...


@dataclass(frozen=True)
class RegistrationHandle:
    """Opaque token returned by register_listener."""

    source_name: str
    id: str = field(default_factory=lambda: str(uuid.uuid4()))


@dataclass
class _Subscription:
    handle: RegistrationHandle
    listener: IEventListener
    level_threshold: EventLevel
    keywords: EventKeywords

    def accepts(self, level: EventLevel, keywords: EventKeywords) -> bool:
        if not level.satisfies(self.level_threshold):
            return False
        # Records without keywords are never filtered out by a mask
        return not keywords or bool(keywords & self.keywords)


class EventChannel:
    """In-process event channel with synchronous, per-listener isolated dispatch."""

    def __init__(self):
        self._lock = threading.Lock()
        self._subscriptions: dict[str, list[_Subscription]] = {}
        self._sources: dict[str, EventSource] = {}
        self._observers: list[ISourceObserver] = []
        self._closed = False

    def publish(
        self,
        source_name: str,
        level: EventLevel,
        message: str,
        keywords: EventKeywords = EventKeywords.NONE,
        exception_detail: str | None = None,
    ) -> None:
        """Deliver a record to every interested listener. Never raises."""
        level = EventLevel(level)
        keywords = EventKeywords(keywords)

        with self._lock:
            subscriptions = self._subscriptions.get(source_name)
            if not subscriptions:
                return
            targets = [s for s in subscriptions if s.accepts(level, keywords)]

        if not targets:
            return

        record = EventRecord.create(
            source_name,
            level,
            message,
            keywords=keywords,
            exception_detail=exception_detail,
        )

        for subscription in targets:
            try:
                if subscription.listener.matches(source_name, level):
                    subscription.listener.on_event(record)
            except Exception as e:
                logger.error(
                    "Error in listener %r for source %s: %s",
                    subscription.listener,
                    source_name,
                    e,
                )

    def register_listener(
        self,
        source_name: str,
        listener: IEventListener,
        level_threshold: EventLevel = EventLevel.LOG_ALWAYS,
        keywords: EventKeywords = EventKeywords.ALL,
    ) -> RegistrationHandle:
        """Subscribe a listener to a source; effective before returning."""
        level_threshold = EventLevel(level_threshold)
        keywords = EventKeywords(keywords)

        with self._lock:
            if self._closed:
                logger.warning(
                    "Channel closed, listener %r for %s not registered",
                    listener,
                    source_name,
                )
                return RegistrationHandle(source_name=source_name)
            subscriptions = self._subscriptions.setdefault(source_name, [])
            for subscription in subscriptions:
                if subscription.listener is listener:
                    subscription.level_threshold = level_threshold
                    subscription.keywords = keywords
                    logger.debug(
                        "Listener %r already registered for %s", listener, source_name
                    )
                    return subscription.handle

            handle = RegistrationHandle(source_name=source_name)
            subscriptions.append(
                _Subscription(
                    handle=handle,
                    listener=listener,
                    level_threshold=level_threshold,
                    keywords=keywords,
                )
            )

        logger.debug(
            "Registered listener %r for %s at %s",
            listener,
            source_name,
            level_threshold.label,
        )
        return handle

    def unregister_listener(self, handle: RegistrationHandle) -> None:
        """Remove a subscription. Unknown or stale handles are ignored."""
        with self._lock:
            subscriptions = self._subscriptions.get(handle.source_name)
            if not subscriptions:
                return
            remaining = [s for s in subscriptions if s.handle != handle]
            if remaining:
                self._subscriptions[handle.source_name] = remaining
            else:
                del self._subscriptions[handle.source_name]

    def create_source(self, name: str) -> EventSource:
        """Get or create the source with this name and announce new ones."""
        with self._lock:
            source = self._sources.get(name)
            if source is not None:
                return source
            source = EventSource(name, self)
            self._sources[name] = source
            observers = list(self._observers)

        logger.info("Event source created: %s", name)
        for observer in observers:
            self._notify_source_created(observer, source)
        return source

    def add_source_observer(self, observer: ISourceObserver) -> None:
        """Attach an observer and replay every source created so far."""
        with self._lock:
            if self._closed:
                return
            self._observers.append(observer)
            existing = list(self._sources.values())

        for source in existing:
            self._notify_source_created(observer, source)

    def _notify_source_created(
        self, observer: ISourceObserver, source: EventSource
    ) -> None:
        try:
            observer.on_source_created(source)
        except Exception as e:
            logger.error(
                "Error in source observer %r for %s: %s", observer, source.name, e
            )

    @property
    def sources(self) -> list[str]:
        """Names of all created sources."""
        with self._lock:
            return list(self._sources)

    def listener_count(self, source_name: str | None = None) -> int:
        """Number of active subscriptions, optionally for one source."""
        with self._lock:
            if source_name is not None:
                return len(self._subscriptions.get(source_name, []))
            return sum(len(subs) for subs in self._subscriptions.values())

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Drop all subscriptions and observers. Later publishes are no-ops."""
        with self._lock:
            self._subscriptions.clear()
            self._observers.clear()
            self._closed = True
        logger.info("Event channel closed")

    def __enter__(self) -> "EventChannel":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
