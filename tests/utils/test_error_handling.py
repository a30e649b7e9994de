"""Tests for error handling utilities."""

import logging
import pytest
from unittest.mock import patch

from config.settings import is_perf_debug
from utils.error_handling import (
    format_error_message,
    log_exception,
    handle_report_error,
    timed,
    ErrorCollector,
)


class TestFormatErrorMessage:
    """Tests for format_error_message function."""

    def test_basic_error_message(self):
        """Test formatting a basic exception."""
        error = ValueError("Invalid value")
        result = format_error_message(error)
        assert result == "ValueError: Invalid value"

    def test_with_context(self):
        """Test formatting with context."""
        error = ValueError("Invalid value")
        result = format_error_message(error, context="Generating salary report")
        assert result == "Generating salary report - ValueError: Invalid value"

    def test_without_type(self):
        """Test formatting without exception type."""
        error = ValueError("Invalid value")
        result = format_error_message(error, include_type=False)
        assert result == "Invalid value"

    def test_context_and_no_type(self):
        """Test formatting with context but without type."""
        error = ValueError("Invalid value")
        result = format_error_message(error, context="Generating salary report", include_type=False)
        assert result == "Generating salary report - Invalid value"

    def test_empty_error_message(self):
        """Test handling of empty error messages."""
        error = ValueError("")
        result = format_error_message(error)
        assert result == "ValueError"

    def test_none_error_message(self):
        """Test handling of None-like error messages."""
        error = Exception("None")
        result = format_error_message(error)
        assert result == "Exception"

    def test_custom_exception(self):
        """Test formatting custom exception types."""
        class CustomError(Exception):
            pass

        error = CustomError("Custom message")
        result = format_error_message(error)
        assert result == "CustomError: Custom message"


class TestLogException:
    """Tests for log_exception function."""

    def test_logs_error_with_context(self):
        """Test that exception is logged with context."""
        error = ValueError("Test error")

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context")

            mock_logger.log.assert_called_once()
            call_args = mock_logger.log.call_args
            assert call_args[0][0] == logging.ERROR
            assert "Test context" in call_args[0][1]
            assert "Test error" in call_args[0][1]
            assert call_args[1]["exc_info"] is True

    def test_logs_with_extra_context(self):
        """Test that extra context is included."""
        error = ValueError("Test error")
        extra = {"file_path": "/data/employees.csv"}

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context", extra=extra)

            call_args = mock_logger.log.call_args
            assert "file_path" in call_args[1]["extra"]
            assert call_args[1]["extra"]["file_path"] == "/data/employees.csv"

    def test_logs_with_custom_level(self):
        """Test logging at different levels."""
        error = ValueError("Test error")

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context", level=logging.WARNING)

            call_args = mock_logger.log.call_args
            assert call_args[0][0] == logging.WARNING

    def test_includes_error_type_in_extra(self):
        """Test that error type is included in extra."""
        error = KeyError("missing_key")

        with patch("utils.error_handling.logger") as mock_logger:
            log_exception(error, "Test context")

            call_args = mock_logger.log.call_args
            assert call_args[1]["extra"]["error_type"] == "KeyError"


class TestHandleReportError:
    """Tests for handle_report_error function."""

    def test_returns_formatted_message(self):
        """Test that it returns a formatted error message."""
        error = ValueError("Invalid data")
        result = handle_report_error(error, "Error loading CSV file")
        assert result == "Error loading CSV file - ValueError: Invalid data"

    def test_logs_exception(self):
        """Test that exception is logged."""
        error = ValueError("Invalid data")

        with patch("utils.error_handling.log_exception") as mock_log:
            handle_report_error(error, "Error loading CSV file")
            mock_log.assert_called_once()

    def test_includes_additional_context_in_log(self):
        """Test that additional args are included in log extra."""
        error = ValueError("Invalid data")
        file_path = "/data/employees.csv"

        with patch("utils.error_handling.log_exception") as mock_log:
            handle_report_error(error, "Error loading CSV file", file_path)

            mock_log.assert_called_once()
            # Check positional args: (error, context, extra_dict)
            call_args = mock_log.call_args
            extra = call_args[0][2] if len(call_args[0]) > 2 else call_args.kwargs.get("extra", {})
            assert "context_0" in extra
            assert extra["context_0"] == file_path

    def test_handles_multiple_context_args(self):
        """Test handling multiple additional context arguments."""
        error = ValueError("Invalid data")

        with patch("utils.error_handling.log_exception") as mock_log:
            handle_report_error(error, "Error loading CSV file", "arg1", "arg2", "arg3")

            mock_log.assert_called_once()
            call_args = mock_log.call_args
            extra = call_args[0][2] if len(call_args[0]) > 2 else call_args.kwargs.get("extra", {})
            assert extra["context_0"] == "arg1"
            assert extra["context_1"] == "arg2"
            assert extra["context_2"] == "arg3"


class TestTimed:
    """Tests for the timed decorator."""

    @pytest.fixture(autouse=True)
    def clear_perf_flag(self):
        is_perf_debug.cache_clear()
        yield
        is_perf_debug.cache_clear()

    def test_passes_through_result(self, monkeypatch):
        """Decorated functions still return their value."""
        monkeypatch.delenv("EMPLOYEE_REPORTS_PERF_DEBUG", raising=False)

        @timed
        def add(a, b):
            return a + b

        assert add(2, 3) == 5
        assert add.__name__ == "add"

    def test_logs_duration_when_enabled(self, monkeypatch):
        """Timing is logged only with EMPLOYEE_REPORTS_PERF_DEBUG=1."""
        monkeypatch.setenv("EMPLOYEE_REPORTS_PERF_DEBUG", "1")

        @timed
        def work():
            return "done"

        with patch("utils.error_handling.logger") as mock_logger:
            assert work() == "done"
            message = mock_logger.debug.call_args[0][0]
            assert message.startswith("PERF:")
            assert "work took" in message

    def test_reraises_and_logs_failure(self, monkeypatch):
        """Failures are timed and re-raised."""
        monkeypatch.setenv("EMPLOYEE_REPORTS_PERF_DEBUG", "1")

        @timed
        def broken():
            raise ValueError("bad layout")

        with patch("utils.error_handling.logger") as mock_logger:
            with pytest.raises(ValueError):
                broken()
            assert "failed after" in mock_logger.debug.call_args[0][0]


class TestErrorCollector:
    """Tests for ErrorCollector class."""

    def test_init_creates_empty_collector(self):
        """Test initialization creates empty collector."""
        collector = ErrorCollector("test operation")
        assert collector.operation_name == "test operation"
        assert collector.errors == []
        assert not collector.has_errors

    def test_catch_context_manager_on_success(self):
        """Test catch context manager with successful operation."""
        collector = ErrorCollector("test")

        with collector.catch("operation 1"):
            x = 1 + 1

        assert not collector.has_errors

    def test_catch_collects_errors(self):
        """Test that catch context manager collects errors."""
        collector = ErrorCollector("test")

        with collector.catch("operation 1"):
            raise ValueError("Error 1")

        assert collector.has_errors
        assert len(collector.errors) == 1
        assert "Error 1" in collector.errors[0]

    def test_catch_includes_context_in_error(self):
        """Test that context is included in error message."""
        collector = ErrorCollector("test")

        with collector.catch("Engineering department report"):
            raise ValueError("Invalid format")

        assert "Engineering department report" in collector.errors[0]

    def test_catch_continues_after_error(self):
        """Test that execution continues after error."""
        collector = ErrorCollector("test")
        results = []

        for i in range(3):
            with collector.catch(f"operation {i}"):
                if i == 1:
                    raise ValueError(f"Error at {i}")
                results.append(i)

        assert results == [0, 2]
        assert len(collector.errors) == 1

    def test_multiple_errors_collected(self):
        """Test that multiple errors are collected."""
        collector = ErrorCollector("batch generation")

        with collector.catch("file 1"):
            raise ValueError("Error 1")

        with collector.catch("file 2"):
            raise KeyError("Error 2")

        with collector.catch("file 3"):
            pass  # Success

        assert len(collector.errors) == 2
        assert collector.has_errors

    def test_get_summary_no_errors(self):
        """Test summary when no errors occurred."""
        collector = ErrorCollector("Batch report generation")
        summary = collector.get_summary()
        assert summary == "Batch report generation completed successfully"

    def test_get_summary_with_errors(self):
        """Test summary when errors occurred."""
        collector = ErrorCollector("Batch report generation")
        for department in ("HR", "Sales"):
            with collector.catch(f"{department} department report"):
                raise OSError("disk full")

        summary = collector.get_summary()
        assert summary == "Batch report generation completed with 2 error(s)"

    def test_logs_errors_at_warning_level(self):
        """Test that collected errors are logged at warning level."""
        collector = ErrorCollector("test")

        with patch("utils.error_handling.log_exception") as mock_log:
            with collector.catch("operation"):
                raise ValueError("Test error")

            call_args = mock_log.call_args
            assert call_args[1]["level"] == logging.WARNING

    def test_has_errors_property(self):
        """Test has_errors property."""
        collector = ErrorCollector("test")
        assert not collector.has_errors

        with collector.catch("operation"):
            raise ValueError("Error")
        assert collector.has_errors

    def test_base_exceptions_propagate(self):
        """Only Exception subclasses are collected."""
        collector = ErrorCollector("test")

        with pytest.raises(KeyboardInterrupt):
            with collector.catch("operation"):
                raise KeyboardInterrupt

        assert not collector.has_errors
