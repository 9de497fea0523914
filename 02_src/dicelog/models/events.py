"""Event record data models."""

import logging
import threading
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import IntEnum, IntFlag

MISSING_PAYLOAD = "Missing Exception Payload"


class EventLevel(IntEnum):
    """Ordered event severity. LOG_ALWAYS as a threshold disables filtering."""

    LOG_ALWAYS = 0
    VERBOSE = 10
    INFORMATIONAL = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @property
    def label(self) -> str:
        """Display name used in rendered output."""
        return _LEVEL_LABELS[self]

    @property
    def logging_level(self) -> int:
        """Matching standard library logging level."""
        return _LOGGING_LEVELS[self]

    def satisfies(self, threshold: "EventLevel") -> bool:
        """
        Whether a record at this level passes the given threshold.

        LOG_ALWAYS records pass any threshold, and a LOG_ALWAYS threshold
        passes any record.
        """
        return (
            self == EventLevel.LOG_ALWAYS
            or threshold == EventLevel.LOG_ALWAYS
            or self >= threshold
        )


_LEVEL_LABELS = {
    EventLevel.LOG_ALWAYS: "LogAlways",
    EventLevel.VERBOSE: "Verbose",
    EventLevel.INFORMATIONAL: "Informational",
    EventLevel.WARNING: "Warning",
    EventLevel.ERROR: "Error",
    EventLevel.CRITICAL: "Critical",
}

_LOGGING_LEVELS = {
    EventLevel.LOG_ALWAYS: logging.INFO,
    EventLevel.VERBOSE: logging.DEBUG,
    EventLevel.INFORMATIONAL: logging.INFO,
    EventLevel.WARNING: logging.WARNING,
    EventLevel.ERROR: logging.ERROR,
    EventLevel.CRITICAL: logging.CRITICAL,
}


class EventKeywords(IntFlag):
    """Coarse categorization flags carried by a record."""

    NONE = 0
    EXCEPTION = 0x1
    ALL = 0xFFFFFFFF


@dataclass(frozen=True)
class EventRecord:
    """One published event. Immutable once built."""

    source_name: str
    level: EventLevel
    message: str
    keywords: EventKeywords = EventKeywords.NONE
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    thread_id: int = field(default_factory=threading.get_native_id)
    exception_detail: str | None = None

    @classmethod
    def create(
        cls,
        source_name: str,
        level: EventLevel,
        message: str,
        keywords: EventKeywords = EventKeywords.NONE,
        exception_detail: str | None = None,
    ) -> "EventRecord":
        """
        Build a record stamped with the current time and thread.

        Exception detail is kept only when keywords carry EXCEPTION.
        """
        keywords = EventKeywords(keywords)
        if not keywords & EventKeywords.EXCEPTION:
            exception_detail = None
        return cls(
            source_name=source_name,
            level=EventLevel(level),
            message=message,
            keywords=keywords,
            exception_detail=exception_detail,
        )

    @property
    def has_exception(self) -> bool:
        """Whether the record is flagged as exception-carrying."""
        return bool(self.keywords & EventKeywords.EXCEPTION)

    def to_dict(self) -> dict:
        """Plain dict view, used by log context and the HTTP API."""
        return {
            "source_name": self.source_name,
            "level": self.level.label,
            "message": self.message,
            "keywords": int(self.keywords),
            "timestamp": self.timestamp.isoformat(),
            "thread_id": self.thread_id,
            "exception_detail": self.exception_detail,
        }
