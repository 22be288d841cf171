"""Shared fixtures for logger tests"""

import io
from datetime import datetime, timedelta, timezone

import pytest

from process_logger import LoggerBuilder


class FakeClock:
    """Deterministic time source that only moves when told to."""

    def __init__(self, start: datetime):
        self.now = start

    def advance(self, **kwargs):
        self.now = self.now + timedelta(**kwargs)

    def __call__(self) -> datetime:
        return self.now


@pytest.fixture
def clock():
    return FakeClock(datetime(2022, 4, 10, 8, 30, 0, 125000, tzinfo=timezone.utc))


@pytest.fixture
def streams():
    return io.StringIO(), io.StringIO()


@pytest.fixture
def logger(clock, streams):
    info_stream, error_stream = streams
    return (LoggerBuilder()
        .with_streams(info_stream=info_stream, error_stream=error_stream)
        .with_clock(clock)
        .build())
