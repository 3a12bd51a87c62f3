"""
Structured logging configuration for the todo tracker.

Provides JSON-formatted logs with trace_id support for correlating records
from one tracker (trace_id is the tracker's tool name).

Environment Variables:
    TODOTRACK_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    TODOTRACK_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from tracker.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="todo")
    logger.info("Reconstructed state", extra={"source_id": "3fa2..."})
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure root logger with structured logging.

    Explicit arguments win over the environment:
    - TODOTRACK_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - TODOTRACK_LOG_FORMAT: json, text (default: json)
    """
    log_level = (level or os.getenv("TODOTRACK_LOG_LEVEL", "INFO")).upper()
    log_format = (fmt or os.getenv("TODOTRACK_LOG_FORMAT", "json")).lower()
    resolved = LEVELS.get(log_level, logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # Logs go to stderr so command output on stdout stays parseable
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(resolved)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the tool name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return TraceAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceAdapter(logging.LoggerAdapter):
    """LoggerAdapter that merges per-call extra fields with the trace_id."""

    def process(self, msg, kwargs):
        kwargs["extra"] = {**self.extra, **(kwargs.get("extra") or {})}
        return msg, kwargs


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all logs have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
