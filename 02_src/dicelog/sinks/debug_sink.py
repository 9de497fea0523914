"""DebugSink: writes records to a diagnostic text stream."""

import sys
import threading
from typing import TextIO

from ..channel import EventSource, IEventChannel, RegistrationHandle
from ..config import DEFAULT_SOURCE_NAME
from ..logging_config import get_logger
from ..models import MISSING_PAYLOAD, EventLevel, EventRecord

logger = get_logger(__name__)

DETAIL_INDENT = "    "


def format_record(record: EventRecord) -> str:
    """
    Render a record as ``HH:mm | thread | level | message``.

    Exception-flagged records get a second, indented line with the detail.
    Any formatting error degrades to the placeholder text.
    """
    try:
        message = record.message if record.message else MISSING_PAYLOAD
        line = (
            f"{record.timestamp:%H:%M} | {record.thread_id} | "
            f"{record.level.label} | {message}"
        )
        if record.has_exception:
            detail = record.exception_detail or MISSING_PAYLOAD
            line = f"{line}\n{DETAIL_INDENT}{detail}"
        return line
    except Exception as e:
        logger.warning("Failed to format record from %s: %s", record.source_name, e)
        return MISSING_PAYLOAD


class DebugSink:
    """
    Echoes one source's records to a diagnostic stream (stderr by default).

    Starts disabled and enables itself, at LOG_ALWAYS, when the channel
    announces a source whose name equals the expected one.
    """

    def __init__(
        self,
        channel: IEventChannel,
        source_name: str = DEFAULT_SOURCE_NAME,
        output: TextIO | None = None,
    ):
        self._channel = channel
        self._source_name = source_name
        self._output = output
        self._lock = threading.Lock()
        self._handle: RegistrationHandle | None = None
        self._enabled = False

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def source_name(self) -> str:
        return self._source_name

    def on_source_created(self, source: EventSource) -> None:
        """Enable for the expected source; names compare case-sensitively."""
        if source.name != self._source_name:
            return
        with self._lock:
            if self._enabled:
                return
            # Set before registering so no record delivered meanwhile is dropped
            self._enabled = True
            self._handle = self._channel.register_listener(
                source.name, self, EventLevel.LOG_ALWAYS
            )
        logger.info("DebugSink enabled for %s", source.name)

    def matches(self, source_name: str, level: EventLevel) -> bool:
        return self.enabled and source_name == self._source_name

    def on_event(self, record: EventRecord) -> None:
        """Format and write one record. Never raises."""
        text = format_record(record)
        # Resolved per write so a replaced sys.stderr is honoured
        output = self._output if self._output is not None else sys.stderr
        try:
            output.write(f"{text}\n")
            output.flush()
        except (OSError, ValueError) as e:
            logger.error("DebugSink failed to write record: %s", e)

    def __repr__(self) -> str:
        return f"DebugSink(source_name={self._source_name!r}, enabled={self.enabled})"
