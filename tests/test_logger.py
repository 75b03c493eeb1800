"""
Tests for logger functionality.
"""

import logging

import pytest
from riskscores.logger import StructuredLogger, get_logger, reset_logger


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_logger_creation(self, tmp_path):
        """Logger should be created with default settings."""
        logger = StructuredLogger(
            name="test",
            level="INFO",
            log_dir=tmp_path,
            enable_console=False,
        )

        assert logger.logger.name == "test"
        assert logger.get_metrics()["api_calls"] == 0

    def test_log_with_context(self, tmp_path):
        """Context is appended to the message as JSON."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.info("Fetched vaults", network=1, count=5)

        content = next(tmp_path.glob("*.log")).read_text()
        assert 'Fetched vaults | Context: {"network": 1, "count": 5}' in content

    def test_metrics_tracking(self, tmp_path):
        """Metrics should be tracked per source."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        logger.record_api_call()
        logger.record_api_call()
        assert logger.get_metrics()["api_calls"] == 2

        logger.record_request_attempt("ydaemon")
        logger.record_request_success("ydaemon")

        logger.record_request_attempt("subgraph")
        logger.record_request_failure("subgraph", "Timeout")

        metrics = logger.get_metrics()

        assert metrics["requests_attempted"] == 2
        assert metrics["requests_successful"] == 1
        assert metrics["requests_failed"] == 1
        assert metrics["requests_retried"] == 0
        assert metrics["errors_by_type"]["Timeout"] == 1
        assert metrics["sources"]["ydaemon"]["success_rate"] == 1.0
        assert metrics["sources"]["subgraph"]["success_rate"] == 0.0

    def test_success_rate_calculation(self, tmp_path):
        """Success rate should be rounded to three places."""
        logger = StructuredLogger(
            name="test",
            log_dir=tmp_path,
            enable_console=False,
        )

        for _ in range(3):
            logger.record_request_attempt("ydaemon")
        logger.record_request_success("ydaemon")
        logger.record_request_success("ydaemon")

        rate = logger.get_metrics()["sources"]["ydaemon"]["success_rate"]
        assert rate == pytest.approx(0.667, rel=0.01)

    def test_metrics_summary_written(self, tmp_path):
        """Summary reports totals, retries and error types."""
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.record_request_attempt("subgraph")
        logger.record_request_retry("subgraph")
        logger.record_request_failure("subgraph", "HTTPError_500")

        logger.log_metrics_summary()

        content = next(tmp_path.glob("*.log")).read_text()
        assert "Requests: 0/1 (0.0% success), 1 retried" in content
        assert "subgraph: 0/1 (0.0%), retries=1" in content
        assert "error HTTPError_500: 1" in content

    def test_log_file_name(self, tmp_path):
        logger = StructuredLogger(name="test", log_dir=tmp_path, enable_console=False)
        logger.info("Test message")

        log_files = list(tmp_path.glob("riskscores_*.log"))
        assert len(log_files) == 1
        assert "Test message" in log_files[0].read_text()

    def test_set_level(self, tmp_path):
        logger = StructuredLogger(name="test", level="INFO", log_dir=tmp_path, enable_file=False)
        logger.set_level("DEBUG")
        assert logger.logger.level == logging.DEBUG
        assert all(h.level == logging.DEBUG for h in logger.logger.handlers)


class TestGlobalLogger:
    """Test global logger singleton."""

    def test_get_logger_singleton(self, tmp_path):
        reset_logger()

        logger1 = get_logger(name="test-global", log_dir=tmp_path, enable_console=False)
        logger2 = get_logger()

        assert logger1 is logger2
        reset_logger()

    def test_level_from_environment(self, tmp_path, monkeypatch):
        reset_logger()
        monkeypatch.setenv("RISKSCORES_LOG_LEVEL", "WARNING")

        logger = get_logger(name="test-env", log_dir=tmp_path, enable_console=False)

        assert logger.logger.level == logging.WARNING
        reset_logger()
