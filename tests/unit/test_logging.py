"""Unit tests for the logging helpers."""

from __future__ import annotations

import logging

import pytest

from dalenius.utils.logging import (
    configure_logging,
    get_logger,
    log_calls,
    log_operation,
    log_performance,
)


class TestGetLogger:
    """Tests for hierarchical logger naming."""

    def test_prefixes_package_name(self) -> None:
        assert get_logger("intervals").name == "dalenius.intervals"

    def test_keeps_qualified_names(self) -> None:
        assert get_logger("dalenius.core.levels").name == "dalenius.core.levels"

    def test_root_name_unchanged(self) -> None:
        assert get_logger("dalenius").name == "dalenius"


class TestConfigureLogging:
    def test_sets_level(self) -> None:
        try:
            configure_logging("DEBUG")
            assert logging.getLogger("dalenius").level == logging.DEBUG
        finally:
            configure_logging("INFO")


class TestDecorators:
    """Tests for log_calls() and log_performance()."""

    def test_log_calls_entry_and_exit(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="dalenius")

        @log_calls()
        def add(a, b):
            return a + b

        assert add(2, b=3) == 5
        assert "Calling " in caplog.text
        assert "Completed " in caplog.text
        assert "add" in caplog.text

    def test_log_calls_reraises(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger="dalenius")

        @log_calls()
        def fail():
            raise ValueError("bad input")

        with pytest.raises(ValueError, match="bad input"):
            fail()
        # Failures are reported by the enclosing log_operation, not here
        assert not [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert "Completed " not in caplog.text

    def test_log_performance_threshold(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="dalenius")

        @log_performance(threshold=0.0)
        def quick():
            return "done"

        assert quick() == "done"
        assert "Performance:" in caplog.text


class TestLogOperation:
    """Tests for the log_operation() context manager."""

    def test_success(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.INFO, logger="dalenius")

        with log_operation("binning", logger=get_logger("test_module")):
            pass

        assert "Starting operation: binning" in caplog.text
        assert "Completed operation: binning" in caplog.text

    def test_failure_logged_and_reraised(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.INFO, logger="dalenius")

        with pytest.raises(RuntimeError):
            with log_operation("binning", logger=get_logger("test_module")):
                raise RuntimeError("exploded")

        assert "Failed operation: binning" in caplog.text
        assert "exploded" in caplog.text

    def test_nested_failure_logged_once(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="dalenius")

        @log_performance(threshold=0.0)
        @log_calls()
        def fail():
            raise RuntimeError("exploded")

        with pytest.raises(RuntimeError):
            with log_operation("binning", logger=get_logger("test_module")):
                fail()

        errors = [r for r in caplog.records if r.levelno >= logging.ERROR]
        assert len(errors) == 1
        assert "Failed operation: binning" in errors[0].getMessage()
