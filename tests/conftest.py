"""Pytest fixtures for all tests."""

import io
import itertools

import pytest

import tempo.pool
import tempo.identifier
from internal.logging import LogLevel, StructuredLogger
from tempo.pool import EntropyPool


class CountingSource:
    """Deterministic byte source: 0, 1, 2, ... 255, 0, ... and call log."""

    def __init__(self):
        self.calls = []
        self._counter = itertools.count()

    def __call__(self, size):
        self.calls.append(size)
        return bytes(next(self._counter) % 256 for _ in range(size))


@pytest.fixture
def counting_source():
    return CountingSource()


@pytest.fixture
def counting_pool(counting_source):
    """Small pool over a deterministic source."""
    return EntropyPool(multiplier=4, source=counting_source)


@pytest.fixture
def log_stream():
    """Route structured logs into a buffer at DEBUG level."""
    stream = io.StringIO()
    StructuredLogger.configure(min_level=LogLevel.DEBUG, stream=stream)
    yield stream
    StructuredLogger.configure()


@pytest.fixture(autouse=True)
def reset_globals():
    """Keep process-wide pool and defaults from leaking between tests."""
    yield
    tempo.pool._pool = None
    tempo.identifier.configure_defaults()
