"""EventChannel module."""

from .event_channel import (
    EventChannel,
    IEventChannel,
    IEventListener,
    ISourceObserver,
    RegistrationHandle,
)
from .source import EventSource

__all__ = [
    "EventChannel",
    "EventSource",
    "IEventChannel",
    "IEventListener",
    "ISourceObserver",
    "RegistrationHandle",
]
