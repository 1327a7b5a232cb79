"""
Tests for trace logging.

Tests key logging features including:
- Level resolution
- The TRACE level and Logger.trace()
- Structured field rendering
"""

import logging
from io import StringIO

import pytest

from cattable import TRACE, InvalidLogLevelError, Logger, create_trace_logger
from cattable.log import FieldFormatter, resolve_level

# =============================================================================
# Test resolve_level()
# =============================================================================


@pytest.mark.unit
class TestResolveLevel:
    """Test resolve_level()."""

    @pytest.mark.parametrize(
        "level,expected",
        [
            ("trace", TRACE),
            ("debug", logging.DEBUG),
            ("Warning", logging.WARNING),
            ("30", 30),
            (logging.ERROR, logging.ERROR),
        ],
    )
    def test_valid(self, level, expected):
        """Test names, numeric strings and ints."""
        assert resolve_level(level) == expected

    @pytest.mark.parametrize("level", ["verbose", True, None, 1.5])
    def test_invalid(self, level):
        """Test unknown names and types raise."""
        with pytest.raises(InvalidLogLevelError) as exc_info:
            resolve_level(level)
        assert exc_info.value.level == level

    def test_trace_level_registered(self):
        """Test TRACE has a level name."""
        assert TRACE == 5
        assert logging.getLevelName(TRACE) == "TRACE"


# =============================================================================
# Test create_trace_logger()
# =============================================================================


@pytest.mark.unit
class TestTraceLogger:
    """Test trace loggers."""

    def test_returns_logger(self, trace_logger):
        """Test the factory returns a cattable Logger."""
        assert isinstance(trace_logger, Logger)
        assert trace_logger.level == TRACE
        assert trace_logger.propagate is False

    def test_trace_written(self, trace_logger, log_stream):
        """Test trace messages reach the stream."""
        trace_logger.trace("cache hit", extra={"field": "c", "category": "_b"})
        output = log_stream.getvalue()
        assert "[T] cache hit" in output
        assert "field[c] category[_b]" in output

    def test_message_without_fields(self, trace_logger, log_stream):
        """Test messages without extra fields are rendered as-is."""
        trace_logger.trace("created table")
        assert log_stream.getvalue().rstrip().endswith("[T] created table")

    def test_level_filters_trace(self):
        """Test trace output is suppressed above TRACE."""
        stream = StringIO()
        lg = create_trace_logger(name="test.quiet", level="info", stream=stream)
        lg.trace("hidden")
        lg.info("shown")
        output = stream.getvalue()
        assert "hidden" not in output
        assert "[I] shown" in output

    def test_default_stream_is_stderr(self, capsys):
        """Test output goes to stderr by default."""
        lg = create_trace_logger(name="test.stderr")
        lg.trace("to stderr")
        captured = capsys.readouterr()
        assert "to stderr" in captured.err
        assert captured.out == ""

    def test_standard_logger_ignored_by_formatter(self):
        """Test records from plain loggers format without fields."""
        record = logging.LogRecord("x", logging.INFO, __file__, 1, "plain", (), None)
        assert FieldFormatter().format(record).endswith("plain")
