"""
Logging for riskscores.

One process-wide logger writes human-readable lines to stderr (stdout is
reserved for the report tables) and everything down to DEBUG into a daily
file. It also counts requests per data source ("subgraph", "ydaemon") so a
report run can end with a short health summary.
"""

import json
import logging
import os
import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s'
FILE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _console_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(fmt=CONSOLE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _file_handler(log_dir: Path) -> logging.Handler:
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / f"riskscores_{datetime.now().strftime('%Y%m%d')}.log"
    handler = logging.FileHandler(log_file, encoding='utf-8')
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(fmt=FILE_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _empty_source() -> Dict[str, int]:
    return {"attempts": 0, "successes": 0, "failures": 0, "retries": 0}


class StructuredLogger:
    """
    Wrapper around a stdlib logger that appends keyword context as JSON
    and keeps request counters per data source.
    """

    def __init__(
        self,
        name: str = "riskscores",
        level: str = "INFO",
        log_dir: Optional[Path] = None,
        enable_file: bool = True,
        enable_console: bool = True,
    ):
        """
        Args:
            name: Logger name
            level: Console threshold (DEBUG, INFO, WARNING, ERROR)
            log_dir: Directory for the daily file (default: $RISKSCORES_LOG_DIR or logs/)
            enable_file: Write the daily log file
            enable_console: Write to stderr
        """
        numeric = getattr(logging, level.upper())
        self.logger = logging.getLogger(name)
        self.logger.setLevel(numeric)
        self.logger.handlers.clear()

        if enable_console:
            self.logger.addHandler(_console_handler(numeric))
        if enable_file:
            self.logger.addHandler(_file_handler(log_dir or Path(os.getenv("RISKSCORES_LOG_DIR", "logs"))))

        self.api_calls = 0
        self.sources: Dict[str, Dict[str, int]] = {}
        self.errors_by_type: Dict[str, int] = {}

    def debug(self, message: str, **context):
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context):
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context):
        self._log(logging.WARNING, message, context)

    def error(self, message: str, **context):
        self._log(logging.ERROR, message, context)

    def _log(self, level: int, message: str, context: dict):
        if context:
            message = f"{message} | Context: {json.dumps(context, default=str)}"
        self.logger.log(level, message)

    def set_level(self, level: str):
        """Change the logger and console threshold; the file keeps DEBUG."""
        numeric = getattr(logging, level.upper())
        self.logger.setLevel(numeric)
        for handler in self.logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(numeric)

    # Request counters

    def _source(self, source: str) -> Dict[str, int]:
        return self.sources.setdefault(source, _empty_source())

    def record_api_call(self):
        """Count one HTTP round trip, retries included."""
        self.api_calls += 1

    def record_request_attempt(self, source: str):
        self._source(source)["attempts"] += 1

    def record_request_success(self, source: str):
        self._source(source)["successes"] += 1

    def record_request_retry(self, source: str):
        self._source(source)["retries"] += 1

    def record_request_failure(self, source: str, error_type: str):
        self._source(source)["failures"] += 1
        self.errors_by_type[error_type] = self.errors_by_type.get(error_type, 0) + 1

    def get_metrics(self) -> dict:
        """Snapshot of the counters with totals and per-source success rates."""
        sources = {}
        for source, counts in self.sources.items():
            stats = dict(counts)
            if stats["attempts"]:
                stats["success_rate"] = round(stats["successes"] / stats["attempts"], 3)
            sources[source] = stats

        return {
            "api_calls": self.api_calls,
            "requests_attempted": sum(s["attempts"] for s in sources.values()),
            "requests_successful": sum(s["successes"] for s in sources.values()),
            "requests_failed": sum(s["failures"] for s in sources.values()),
            "requests_retried": sum(s["retries"] for s in sources.values()),
            "errors_by_type": dict(self.errors_by_type),
            "sources": sources,
        }

    def log_metrics_summary(self):
        metrics = self.get_metrics()
        attempted = metrics["requests_attempted"]
        succeeded = metrics["requests_successful"]
        rate = round(succeeded / attempted * 100, 1) if attempted else 0

        self.info("=== Request Metrics ===")
        self.info(f"API Calls: {metrics['api_calls']}")
        self.info(f"Requests: {succeeded}/{attempted} ({rate}% success), {metrics['requests_retried']} retried")
        for source, stats in metrics["sources"].items():
            self.info(
                f"  {source}: {stats['successes']}/{stats['attempts']} "
                f"({stats.get('success_rate', 0) * 100:.1f}%), retries={stats['retries']}"
            )
        for error_type, count in metrics["errors_by_type"].items():
            self.info(f"  error {error_type}: {count}")


_global_logger: Optional[StructuredLogger] = None


def get_logger(name: str = "riskscores", level: Optional[str] = None, **kwargs) -> StructuredLogger:
    """Return the process-wide logger, creating it on first use.

    The level defaults to $RISKSCORES_LOG_LEVEL, then INFO.
    """
    global _global_logger

    if _global_logger is None:
        level = level or os.getenv("RISKSCORES_LOG_LEVEL", "INFO")
        _global_logger = StructuredLogger(name=name, level=level, **kwargs)

    return _global_logger


def reset_logger():
    """Drop the process-wide logger so the next get_logger() builds a fresh one."""
    global _global_logger
    _global_logger = None
