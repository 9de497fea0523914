"""Core data models for dicelog."""

from .events import MISSING_PAYLOAD, EventKeywords, EventLevel, EventRecord

__all__ = [
    "EventKeywords",
    "EventLevel",
    "EventRecord",
    "MISSING_PAYLOAD",
]
