"""dicelog: structured event channel with a dice-throw demo."""

from .app import Application, IApplication
from .channel import (
    EventChannel,
    EventSource,
    IEventChannel,
    IEventListener,
    ISourceObserver,
    RegistrationHandle,
)
from .config import Settings
from .dice import DiceThrow, DiceThrowResult
from .models import MISSING_PAYLOAD, EventKeywords, EventLevel, EventRecord
from .sinks import DebugSink, LoggingSink, RecentEventsSink, format_record

__all__ = [
    # Application
    "Application",
    "IApplication",
    "Settings",
    # Models
    "EventKeywords",
    "EventLevel",
    "EventRecord",
    "MISSING_PAYLOAD",
    # Channel
    "EventChannel",
    "EventSource",
    "IEventChannel",
    "IEventListener",
    "ISourceObserver",
    "RegistrationHandle",
    # Sinks
    "DebugSink",
    "LoggingSink",
    "RecentEventsSink",
    "format_record",
    # Producer
    "DiceThrow",
    "DiceThrowResult",
]
