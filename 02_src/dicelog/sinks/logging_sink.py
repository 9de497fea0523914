"""LoggingSink: forwards event records into the logging hierarchy."""

import logging

from ..models import EventLevel, EventRecord


class LoggingSink:
    """Echoes records to ``<prefix>.<source_name>`` loggers at the mapped level."""

    def __init__(
        self,
        logger_prefix: str = "dicelog.events",
        level_threshold: EventLevel = EventLevel.LOG_ALWAYS,
    ):
        self._logger_prefix = logger_prefix
        self._level_threshold = EventLevel(level_threshold)

    def matches(self, source_name: str, level: EventLevel) -> bool:
        return EventLevel(level).satisfies(self._level_threshold)

    def on_event(self, record: EventRecord) -> None:
        target = logging.getLogger(f"{self._logger_prefix}.{record.source_name}")
        context = record.to_dict()
        if not record.has_exception:
            context.pop("exception_detail")
        target.log(
            record.level.logging_level,
            record.message,
            extra={"context": context},
        )

    def __repr__(self) -> str:
        return f"LoggingSink(logger_prefix={self._logger_prefix!r})"
