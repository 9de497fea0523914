"""Pytest configuration and fixtures."""

import io
import random
import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

SOURCE_NAME = "DiceThrowLibrary"


class RecordingListener:
    """Listener that keeps every record it receives."""

    def __init__(self, wanted: bool = True):
        self.records = []
        self.wanted = wanted

    def matches(self, source_name, level) -> bool:
        return self.wanted

    def on_event(self, record) -> None:
        self.records.append(record)


@pytest.fixture
def channel():
    """Create an EventChannel, closed after the test."""
    from dicelog.channel import EventChannel

    ch = EventChannel()
    yield ch
    ch.close()


@pytest.fixture
def listener():
    """Create a recording listener."""
    return RecordingListener()


@pytest.fixture
def source(channel):
    """Create the dice library's event source."""
    return channel.create_source(SOURCE_NAME)


@pytest.fixture
def debug_output():
    """In-memory diagnostic stream."""
    return io.StringIO()


@pytest.fixture
def debug_sink(channel, debug_output):
    """DebugSink observing the channel, writing to debug_output."""
    from dicelog.sinks import DebugSink

    sink = DebugSink(channel, SOURCE_NAME, output=debug_output)
    channel.add_source_observer(sink)
    return sink


@pytest.fixture
def dice(source):
    """DiceThrow with a seeded RNG."""
    from dicelog.dice import DiceThrow

    return DiceThrow(source, rng=random.Random(1234))


@pytest.fixture
def settings(tmp_path):
    """Settings that keep the debug sink quiet."""
    from dicelog.config import Settings

    return Settings(
        source_name=SOURCE_NAME,
        debug_sink_enabled=False,
        recent_capacity=50,
        log_file=str(tmp_path / "app.log"),
    )


@pytest_asyncio.fixture
async def application(settings):
    """Started Application."""
    from dicelog.app import Application

    app = Application(settings)
    await app.start()
    yield app
    await app.stop()


@pytest.fixture
def make_listener():
    """Factory for extra recording listeners."""
    return RecordingListener
