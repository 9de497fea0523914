"""EventSource: producer handle bound to a single source name."""

import traceback
from typing import Protocol

from ..models import EventKeywords, EventLevel


class IPublisher(Protocol):
    """Anything that accepts publish requests."""

    def publish(
        self,
        source_name: str,
        level: EventLevel,
        message: str,
        keywords: EventKeywords = EventKeywords.NONE,
        exception_detail: str | None = None,
    ) -> None:
        """Publish one event."""
        ...


class EventSource:
    """Named event source. Producers log through it without knowing the sinks."""

    def __init__(self, name: str, channel: IPublisher):
        self._name = name
        self._channel = channel

    @property
    def name(self) -> str:
        """Source name listeners filter on."""
        return self._name

    def write(
        self,
        level: EventLevel,
        message: str,
        keywords: EventKeywords = EventKeywords.NONE,
        exception_detail: str | None = None,
    ) -> None:
        """Publish an event under this source's name."""
        self._channel.publish(
            self._name,
            level,
            message,
            keywords=keywords,
            exception_detail=exception_detail,
        )

    def verbose(self, message: str) -> None:
        self.write(EventLevel.VERBOSE, message)

    def info(self, message: str) -> None:
        self.write(EventLevel.INFORMATIONAL, message)

    def warning(self, message: str) -> None:
        self.write(EventLevel.WARNING, message)

    def error(self, message: str) -> None:
        self.write(EventLevel.ERROR, message)

    def critical(self, message: str) -> None:
        self.write(EventLevel.CRITICAL, message)

    def exception(self, message: str, exc: BaseException) -> None:
        """
        Publish an ERROR event carrying the formatted traceback of exc.

        The exception itself is left alone; re-raising is up to the caller.
        """
        detail = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        ).rstrip()
        self.write(
            EventLevel.ERROR,
            message,
            keywords=EventKeywords.EXCEPTION,
            exception_detail=detail,
        )

    def __repr__(self) -> str:
        return f"EventSource(name={self._name!r})"
