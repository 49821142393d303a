"""Tests for bundled writers, formatters and providers"""

import io
import json
import logging
import pytest
from datetime import datetime

from minliblog import LoggingContext, LogEvent, LogLevel
from minliblog.formatters import JSONFormatter, TextFormatter
from minliblog.providers import (
    EventSink,
    WriterProvider,
    console_provider,
    file_provider,
    null_provider,
    stdlib_provider,
    writer_provider,
)
from minliblog.writers import ConsoleWriter, FileWriter, StdlibWriter

FIXED_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456)


class MockWriter:
    """Mock writer for testing."""

    def __init__(self):
        self.events = []

    def write(self, event: LogEvent) -> None:
        self.events.append(event)

    def flush(self) -> None:
        pass


class ListHandler(logging.Handler):
    """Collect stdlib log records."""

    def __init__(self):
        super().__init__(level=logging.NOTSET)
        self.records = []

    def emit(self, record):
        self.records.append(record)


def make_event(level=LogLevel.INFO, message="Test", exception=None, name="app"):
    return LogEvent(name, FIXED_TIME, level, message, exception)


class TestTextFormatter:
    """Test text formatter."""

    def test_default_template(self):
        text = TextFormatter().format(make_event(message="hello"))
        assert text == "[2024-05-01 12:30:45.123] [INFO ] [app] hello"

    def test_exception_suffix(self):
        text = TextFormatter().format(make_event(exception=ValueError("bad")))
        assert text.endswith("Test | ValueError: bad")

    def test_custom_template(self):
        formatter = TextFormatter("{level_value}:{level} {logger} - {message}")
        assert formatter(make_event(LogLevel.WARN)) == "3:WARN app - Test"

    def test_unknown_placeholder(self):
        formatter = TextFormatter("{nope} {message}")
        assert formatter.format(make_event()).startswith("[FORMAT ERROR:")


class TestJSONFormatter:
    """Test JSON formatter."""

    def test_fields(self):
        data = json.loads(JSONFormatter().format(make_event(LogLevel.ERROR, "Failed")))
        assert data["level"] == "ERROR"
        assert data["message"] == "Failed"
        assert data["logger"] == "app"
        assert data["timestamp"] == FIXED_TIME.isoformat()
        assert "thread_id" in data

    def test_exception(self):
        formatter = JSONFormatter(include_thread_info=False, include_traceback=True)
        try:
            raise RuntimeError("kaput")
        except RuntimeError as e:
            data = json.loads(formatter.format(make_event(exception=e)))
        assert data["exception"]["type"] == "RuntimeError"
        assert data["exception"]["message"] == "kaput"
        assert "Traceback" in data["exception"]["traceback"]
        assert "thread_id" not in data

    def test_anonymous_logger(self):
        data = json.loads(JSONFormatter().format(make_event(name="")))
        assert "logger" not in data


class TestWriters:
    """Test bundled writers."""

    def test_console_plain(self):
        stream = io.StringIO()
        ConsoleWriter(colored=False, stream=stream).write(make_event(message="hi"))
        assert stream.getvalue() == str(make_event(message="hi")) + "\n"

    def test_console_colored(self):
        stream = io.StringIO()
        ConsoleWriter(colored=True, stream=stream).write(make_event(LogLevel.ERROR))
        assert stream.getvalue().startswith(LogLevel.ERROR.color_code)

    def test_file_writer(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        writer = FileWriter(str(path), formatter=TextFormatter("{level} {message}"))
        writer.write(make_event(message="first"))
        writer.write(make_event(LogLevel.WARN, "second"))
        writer.close()

        assert path.read_text(encoding="utf-8").splitlines() == ["INFO first", "WARN second"]

    def test_file_writer_after_close(self, tmp_path):
        writer = FileWriter(str(tmp_path / "app.log"))
        writer.close()
        writer.write(make_event())
        writer.flush()


class TestStdlibWriter:
    """Test the bridge to the logging module."""

    @pytest.fixture
    def handler(self):
        std_logger = logging.getLogger("minliblog.tests.bridge")
        handler = ListHandler()
        std_logger.addHandler(handler)
        old_level = std_logger.level
        std_logger.setLevel(1)
        yield handler
        std_logger.removeHandler(handler)
        std_logger.setLevel(old_level)

    def test_forwards_record(self, handler):
        error = RuntimeError("boom")
        StdlibWriter().write(make_event(LogLevel.ERROR, "50% done", error, "minliblog.tests.bridge"))

        record = handler.records[0]
        assert record.name == "minliblog.tests.bridge"
        assert record.levelno == logging.ERROR
        assert record.getMessage() == "50% done"
        assert record.exc_info[1] is error
        assert record.created == pytest.approx(FIXED_TIME.timestamp())

    def test_level_mapping(self, handler):
        writer = StdlibWriter()
        for level in LogLevel:
            writer.write(make_event(level, name="minliblog.tests.bridge"))

        assert [r.levelno for r in handler.records] == [
            5, logging.DEBUG, logging.INFO, logging.WARNING, logging.ERROR, logging.CRITICAL
        ]
        assert handler.records[0].levelname == "TRACE"

    def test_respects_stdlib_level(self, handler):
        logging.getLogger("minliblog.tests.bridge").setLevel(logging.WARNING)
        writer = StdlibWriter()
        writer.write(make_event(LogLevel.INFO, name="minliblog.tests.bridge"))
        writer.write(make_event(LogLevel.WARN, name="minliblog.tests.bridge"))

        assert [r.levelno for r in handler.records] == [logging.WARNING]


class TestEventSink:
    """Test the writer-backed sink."""

    def test_rebuilds_event(self):
        writer = MockWriter()
        sink = EventSink("svc", [writer])
        error = ValueError("x")

        sink(FIXED_TIME, 4, "failed", error)

        event = writer.events[0]
        assert event.logger_name == "svc"
        assert event.timestamp == FIXED_TIME
        assert event.level == LogLevel.ERROR
        assert event.message == "failed"
        assert event.exception is error

    def test_min_level(self):
        writer = MockWriter()
        sink = EventSink("svc", [writer], min_level=LogLevel.WARN)

        sink(FIXED_TIME, 2, "info", None)
        sink(FIXED_TIME, 3, "warn", None)
        sink(FIXED_TIME, 5, "fatal", None)

        assert [e.message for e in writer.events] == ["warn", "fatal"]

    def test_multiple_writers(self):
        first, second = MockWriter(), MockWriter()
        EventSink("svc", [first, second])(FIXED_TIME, 2, "both", None)
        assert len(first.events) == len(second.events) == 1


class TestProviders:
    """Test provider factories end to end."""

    def test_writer_provider(self):
        writer = MockWriter()
        context = LoggingContext()
        logger = context.get_logger("lib.component")

        context.set_provider(writer_provider(writer, min_level=LogLevel.INFO))
        logger.debug("hidden")
        logger.info("Loaded {0} items", 3)

        assert [(e.logger_name, e.message) for e in writer.events] == [
            ("lib.component", "Loaded 3 items")
        ]

    def test_writer_provider_needs_writer(self):
        with pytest.raises(ValueError):
            writer_provider()

    def test_console_provider(self):
        stream = io.StringIO()
        context = LoggingContext()
        context.set_provider(console_provider(colored=False, stream=stream, formatter=TextFormatter("{logger}: {message}")))

        context.get_logger("app").warn("disk at {0}%", 91)

        assert stream.getvalue() == "app: disk at 91%\n"

    def test_file_provider(self, tmp_path):
        path = tmp_path / "app.log"
        provider = file_provider(str(path), formatter=TextFormatter("{logger} {message}"))
        context = LoggingContext()
        context.set_provider(provider)

        context.get_logger("a").info("one")
        context.get_logger("b").info("two")
        provider.flush()
        assert path.read_text(encoding="utf-8").splitlines() == ["a one", "b two"]

        context.set_provider(None)
        provider.close()

        assert isinstance(provider, WriterProvider)
        assert all(writer._file is None for writer in provider.writers)

    def test_writer_provider_close_skips_writers_without_close(self, tmp_path):
        file_writer = FileWriter(str(tmp_path / "app.log"))
        provider = writer_provider(MockWriter(), file_writer)

        provider.flush()
        provider.close()

        assert file_writer._file is None

    def test_stdlib_provider(self):
        std_logger = logging.getLogger("minliblog.tests.provider")
        handler = ListHandler()
        std_logger.addHandler(handler)
        std_logger.setLevel(logging.DEBUG)
        try:
            context = LoggingContext()
            context.set_provider(stdlib_provider())
            context.get_logger("minliblog.tests.provider").info("via {0}", "stdlib")
        finally:
            std_logger.removeHandler(handler)

        assert [r.getMessage() for r in handler.records] == ["via stdlib"]

    def test_null_provider(self):
        context = LoggingContext()
        logger = context.get_logger("a")
        context.set_provider(null_provider)
        assert not logger.is_bound
