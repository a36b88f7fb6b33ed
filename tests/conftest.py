"""Shared test fixtures for all test modules."""

from datetime import datetime, timedelta, timezone

import pytest

from memlog import ListSink, Logger


class FakeClock:
    """Controllable replacement for the logger's clock."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += timedelta(seconds=seconds)


@pytest.fixture
def clock(monkeypatch: pytest.MonkeyPatch) -> FakeClock:
    """Freeze the logger clock at 2018-05-01T10:06:07.050Z."""
    fake = FakeClock(datetime(2018, 5, 1, 10, 6, 7, 50000, tzinfo=timezone.utc))
    monkeypatch.setattr("memlog.logger._now", fake)
    return fake


@pytest.fixture
def sink() -> ListSink:
    """Sink collecting every printed line."""
    return ListSink()


@pytest.fixture
def logger(sink: ListSink) -> Logger:
    """Logger printing into the collecting sink."""
    return Logger(print_function=sink)


@pytest.fixture
def quiet_logger() -> Logger:
    """Logger that neither prints nor writes."""
    return Logger(print_to_console=False)


class RecordingFileWriter:
    """LogFileWriterPort implementation that records every call."""

    def __init__(self) -> None:
        self.appended: list[tuple[str, str]] = []
        self.dumps: list[tuple[str, str]] = []

    def append_line(self, path: str, line: str) -> None:
        self.appended.append((path, line))

    def dump(self, path: str, text: str) -> None:
        self.dumps.append((path, text))


@pytest.fixture
def file_writer() -> RecordingFileWriter:
    """File writer that records calls instead of touching the disk."""
    return RecordingFileWriter()
