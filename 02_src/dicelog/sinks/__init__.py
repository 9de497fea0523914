"""Event sinks."""

from .debug_sink import DebugSink, format_record
from .logging_sink import LoggingSink
from .recent_sink import RecentEventsSink

__all__ = ["DebugSink", "LoggingSink", "RecentEventsSink", "format_record"]
