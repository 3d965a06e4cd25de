"""Unit tests for utility and logging modules."""

import io
import json
import time

from core.errors import EntropyError
from internal.logging import LogLevel, StructuredLogger, get_logger
from utils.timestamp import format_timestamp, now_micros, now_millis


class TestTimestamp:
    """Tests for timestamp utilities."""

    def test_format_timestamp_iso_format(self):
        """Timestamp is ISO 8601 format."""
        ts = format_timestamp()
        assert "T" in ts
        assert ts.endswith("Z")

    def test_format_timestamp_has_microseconds(self):
        """Timestamp includes microseconds."""
        ts = format_timestamp()
        decimal_part = ts.split(".")[1].rstrip("Z")
        assert len(decimal_part) == 6

    def test_format_timestamp_fixed(self):
        assert format_timestamp(0) == "1970-01-01T00:00:00.000000Z"

    def test_now_millis_returns_int(self):
        assert isinstance(now_millis(), int)

    def test_now_millis_reasonable_value(self):
        """now_millis is after 2020 and tracks time.time."""
        millis = now_millis()
        assert millis > 1577836800000  # 2020-01-01
        assert abs(millis - time.time() * 1000) < 5000

    def test_now_micros_consistent(self):
        assert now_micros() // 1000 >= now_millis() - 1000


class TestStructuredLogger:
    """Tests for the JSON logger."""

    def test_emits_json(self):
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.INFO, stream)
        logger.info("hello", size=3)
        record = json.loads(stream.getvalue())
        assert record["msg"] == "hello"
        assert record["level"] == "INFO"
        assert record["size"] == 3
        assert "timestamp" in record

    def test_filters_below_level(self):
        stream = io.StringIO()
        logger = StructuredLogger(LogLevel.WARN, stream)
        logger.debug("hidden")
        logger.info("hidden")
        logger.warn("shown", error=ValueError("bad"))
        lines = stream.getvalue().splitlines()
        assert len(lines) == 1
        assert json.loads(lines[0])["err"] == "bad"

    def test_is_enabled(self):
        logger = StructuredLogger(LogLevel.INFO)
        assert logger.is_enabled(LogLevel.ERROR)
        assert not logger.is_enabled(LogLevel.DEBUG)

    def test_configure_replaces_singleton(self, log_stream):
        get_logger().debug("configured")
        assert json.loads(log_stream.getvalue())["msg"] == "configured"

    def test_level_parse(self):
        assert LogLevel.parse("debug") == LogLevel.DEBUG
        assert LogLevel.parse("nonsense") == LogLevel.INFO


class TestErrors:
    """Tests for error context."""

    def test_error_to_dict(self):
        cause = OSError("gone")
        error = EntropyError("failed", requested=64, cause=cause)
        record = error.to_dict()
        assert record["type"] == "EntropyError"
        assert record["requested"] == 64
        assert "gone" in record["cause"]
        assert record["timestamp"].endswith("Z")
