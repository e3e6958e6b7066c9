r"""
Logging configuration module for twitchwire.

Provides a clean, configurable logging setup using the colorlog library with
structured error logging and aggregation of decode failures.
"""

import atexit
import logging
import os
import sys
import threading
import time
from collections import Counter, deque
from typing import Any

import colorlog


class ErrorAggregator:
    """Counts decode failures per category.

    Keeps the last ``max_per_type`` entries of each category for the exit
    report, and a running count that makes the alert check constant time.
    """

    def __init__(self, max_per_type: int = 1000):
        self.max_per_type = max_per_type
        self.lock = threading.Lock()
        self.errors: dict[str, deque[dict[str, Any]]] = {}
        self.counts: Counter[str] = Counter()
        self.start_time = time.time()

    def record_error(
        self, error_type: str, message: str, context: dict[str, Any] | None = None
    ) -> None:
        """Record an error occurrence with context."""
        entry = {"timestamp": time.time(), "message": message, "context": context or {}}
        with self.lock:
            if error_type not in self.errors:
                self.errors[error_type] = deque(maxlen=self.max_per_type)
            self.errors[error_type].append(entry)
            self.counts[error_type] += 1

    def rate_per_hour(self, error_type: str) -> float:
        runtime_hours = (time.time() - self.start_time) / 3600
        return self.counts[error_type] / max(runtime_hours, 1)

    def should_alert(self, error_type: str, threshold_rate: float = 1000.0) -> bool:
        """Check if an error type should trigger an alert based on rate."""
        return self.rate_per_hour(error_type) > threshold_rate

    def get_error_summary(self) -> dict[str, Any]:
        """Get a summary of error patterns."""
        with self.lock:
            return {
                error_type: {
                    "total_count": self.counts[error_type],
                    "rate_per_hour": self.rate_per_hour(error_type),
                    "last_occurrence": entries[-1],
                }
                for error_type, entries in self.errors.items()
            }

    def reset(self) -> None:
        """Forget every recorded error."""
        with self.lock:
            self.errors.clear()
            self.counts.clear()
            self.start_time = time.time()

    def log_summary_report(self) -> None:
        """Log a summary report of error patterns."""
        summary = self.get_error_summary()
        if not summary:
            logging.info("No decode errors recorded in current session")
            return

        logging.warning("DECODE ERROR SUMMARY REPORT")
        for error_type, stats in summary.items():
            logging.warning(
                f"  {error_type}: {stats['total_count']} total, "
                f"{stats['rate_per_hour']:.1f}/hour, "
                f"last: {stats['last_occurrence']['message']}"
            )


# Global error aggregator instance
error_aggregator = ErrorAggregator()


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.WARNING,
) -> None:
    """Log an error with structured context and aggregation.

    Args:
        error_type: Category of the error (e.g. 'tokenize', 'message', 'tag')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: WARNING, a bad line is never fatal)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}: {str(exception)}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.getLogger("twitchwire").log(level, structured_message)

    error_aggregator.record_error(error_type, message, context)

    if error_aggregator.should_alert(error_type):
        logging.getLogger("twitchwire").critical(
            f"HIGH ERROR RATE ALERT: {error_type} occurring at "
            f"{error_aggregator.rate_per_hour(error_type):.1f}/hour"
        )


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog.

    Supports environment variable configuration for log levels.
    """

    def __init__(self, config=None):
        """Initialize the configurator.

        Args:
            config: Optional config dict; ``report_on_exit`` toggles the
                final error summary.
        """
        self.config = config or {}

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "magenta",
            },
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
        )

    def configure(self):
        """Configure logging with colored output using colorlog.

        Uses environment variables:
        - DEBUG: Set to 'true', '1', or 'yes' for DEBUG level, otherwise INFO
        """
        debug_env = os.environ.get("DEBUG", "").lower()
        log_level = logging.DEBUG if debug_env in ("true", "1", "yes") else logging.INFO

        formatter = self.build_formatter()

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(formatter)

        logging.basicConfig(
            level=log_level,
            handlers=[handler],
            format="%(message)s",
        )

        root_logger = logging.getLogger()
        root_logger.setLevel(log_level)

        for h in root_logger.handlers:
            h.setFormatter(formatter)

        if self.config.get("report_on_exit", True):
            atexit.register(self._log_final_error_summary)
        return root_logger

    def _log_final_error_summary(self):
        """Log final error summary on application exit."""
        try:
            logging.info("Final decode error summary before shutdown:")
            error_aggregator.log_summary_report()
        except Exception as e:  # noqa: BLE001
            logging.error(f"Failed to log final error summary: {e}")
