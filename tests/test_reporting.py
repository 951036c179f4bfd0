"""
Failure records and reporters.
"""

import io
import logging

import pytest
from rich.console import Console

from jsonexpect import (
    ConsoleReporter,
    ExpectationError,
    Failure,
    FailureCollector,
    FailureKind,
    LoggingReporter,
    RaisingReporter,
    ReporterType,
    Settings,
    create_reporter,
    new_object,
)


@pytest.fixture
def failure() -> Failure:
    return Failure(
        assertion_name="Object.equal",
        kind=FailureKind.EQUAL,
        expected={"foo": 456.0},
        actual={"foo": 123.0},
    )


class TestFailure:
    def test_format(self, failure):
        text = str(failure)
        assert text.startswith("❌ Object.equal: equal")
        assert 'Expected: {"foo": 456.0}' in text
        assert 'Actual:   {"foo": 123.0}' in text
        assert "Reason" not in text

    def test_format_construction_failure(self):
        text = Failure("", FailureKind.INVALID_INPUT, actual="<set> {1}", message="Unsupported type: set").format()
        assert text.startswith("❌ <construction>: invalid-input")
        assert "Reason:   Unsupported type: set" in text
        assert "Expected" not in text

    def test_format_truncates(self):
        text = Failure("String.equal", FailureKind.EQUAL, "x" * 200, "y").format(max_length=20)
        expected_line = [line for line in text.splitlines() if "Expected" in line][0]
        assert expected_line.endswith("...")
        assert len(expected_line.split("Expected: ")[1]) == 20

    def test_to_dict(self, failure):
        assert failure.to_dict() == {
            "assertion_name": "Object.equal",
            "kind": "equal",
            "expected": {"foo": 456.0},
            "actual": {"foo": 123.0},
            "message": "",
        }

    def test_frozen(self, failure):
        with pytest.raises(AttributeError):
            failure.kind = FailureKind.CONTAINS


class TestFailureCollector:
    def test_empty(self):
        collector = FailureCollector()
        assert not collector.failed
        assert collector.last() is None
        assert collector.summary() == "✅ No failures"

    def test_collects_in_order(self, collector):
        new_object(collector, {"a": 1}).contains_key("b").equal({"a": 2})
        assert len(collector) == 2
        assert collector.kinds() == [FailureKind.KEY_MISSING, FailureKind.EQUAL]

    def test_summary(self, collector):
        obj = new_object(collector, {"a": 1})
        obj.contains_key("b").contains_key("c").empty()
        summary = collector.summary()
        assert summary.splitlines()[0] == "3 failure(s) (empty: 1, key-missing: 2)"
        assert summary.count("❌") == 3

    def test_clear(self, collector):
        new_object(collector, None)
        collector.clear()
        assert not collector.failed


class TestRaisingReporter:
    def test_raises_on_failure(self):
        with pytest.raises(ExpectationError) as exc_info:
            new_object(RaisingReporter(), {"a": 1}).contains_key("b")
        assert exc_info.value.failure.kind == FailureKind.KEY_MISSING
        assert "Object.contains_key" in str(exc_info.value)

    def test_is_assertion_error(self):
        with pytest.raises(AssertionError):
            RaisingReporter().report(Failure("x", FailureKind.EMPTY))

    def test_success_does_not_raise(self):
        new_object(RaisingReporter(), {"a": 1}).contains_key("a")


class TestLoggingReporter:
    def test_logs_warning(self, caplog):
        reporter = LoggingReporter()
        with caplog.at_level(logging.WARNING, logger="jsonexpect"):
            new_object(reporter, {"a": 1}).contains_key("b")
        assert len(caplog.records) == 1
        record = caplog.records[0]
        assert record.levelno == logging.WARNING
        assert "key-missing" in record.getMessage()

    def test_custom_logger_and_level(self, caplog):
        log = logging.getLogger("tests.api")
        reporter = LoggingReporter(log=log, level=logging.ERROR)
        with caplog.at_level(logging.ERROR, logger="tests.api"):
            reporter.report(Failure("Array.empty", FailureKind.EMPTY, actual=[1.0]))
        assert caplog.records[0].name == "tests.api"
        assert caplog.records[0].levelno == logging.ERROR


class TestConsoleReporter:
    def test_prints_numbered_panels(self):
        output = io.StringIO()
        reporter = ConsoleReporter(console=Console(file=output, width=100))
        new_object(reporter, {"a": 1}).contains_key("b").contains_key("c")
        text = output.getvalue()
        assert reporter.count == 2
        assert "Failure #1" in text
        assert "Failure #2" in text
        assert "Object.contains_key" in text


class TestCreateReporter:
    @pytest.mark.parametrize("reporter_type, cls", [
        (ReporterType.COLLECT, FailureCollector),
        (ReporterType.RAISE, RaisingReporter),
        (ReporterType.LOG, LoggingReporter),
        (ReporterType.CONSOLE, ConsoleReporter),
    ])
    def test_types(self, reporter_type, cls):
        assert isinstance(create_reporter(Settings(reporter=reporter_type)), cls)

    def test_max_value_length_passed(self):
        reporter = create_reporter(Settings(max_value_length=42))
        assert reporter.max_value_length == 42

    def test_unsupported(self):
        with pytest.raises(ValueError):
            create_reporter(Settings(reporter="bogus"))
