"""RecentEventsSink: bounded in-memory buffer of recent records."""

import threading
from collections import deque

from ..config import DEFAULT_RECENT_CAPACITY
from ..models import EventLevel, EventRecord


class RecentEventsSink:
    """Keeps the newest records, dropping the oldest once full."""

    def __init__(self, capacity: int = DEFAULT_RECENT_CAPACITY):
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._lock = threading.Lock()
        self._records: deque[EventRecord] = deque(maxlen=capacity)

    def matches(self, source_name: str, level: EventLevel) -> bool:
        return True

    def on_event(self, record: EventRecord) -> None:
        with self._lock:
            self._records.append(record)

    def records(
        self,
        limit: int | None = None,
        min_level: EventLevel = EventLevel.LOG_ALWAYS,
        source_name: str | None = None,
    ) -> list[EventRecord]:
        """Buffered records, oldest first, optionally filtered."""
        with self._lock:
            snapshot = list(self._records)

        selected = [
            r
            for r in snapshot
            if r.level.satisfies(min_level)
            and (source_name is None or r.source_name == source_name)
        ]
        if limit is not None:
            selected = selected[-limit:] if limit > 0 else []
        return selected

    def clear(self) -> None:
        with self._lock:
            self._records.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
