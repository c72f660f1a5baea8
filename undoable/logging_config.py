"""
Structured logging configuration for undoable.

Provides JSON-formatted logs with a trace_id field. Reducers use the event
type as trace_id so one dispatch can be followed through its log records.

Environment Variables:
    UNDOABLE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: INFO
    UNDOABLE_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from undoable.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="@@undoable/UNDO")
    logger.debug("after undo")

The library itself never calls setup_logging(); hosts opt in.
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

LOGGER_NAMESPACE = "undoable"


def setup_logging() -> None:
    """
    Configure the undoable logger namespace with structured logging.

    Handlers on the root logger are left alone; undoable records stop at the
    namespace logger so they are not emitted twice.

    Reads configuration from environment variables:
    - UNDOABLE_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: INFO)
    - UNDOABLE_LOG_FORMAT: json, text (default: json)
    """
    log_level = os.getenv("UNDOABLE_LOG_LEVEL", "INFO").upper()
    log_format = os.getenv("UNDOABLE_LOG_FORMAT", "json").lower()

    level_map = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    level = level_map.get(log_level, logging.INFO)

    ns_logger = logging.getLogger(LOGGER_NAMESPACE)
    ns_logger.setLevel(level)
    ns_logger.propagate = False

    # Replace handlers from an earlier setup_logging() call
    for handler in ns_logger.handlers[:]:
        ns_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter: logging.Formatter = JsonFormatter(
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
    ns_logger.addHandler(handler)


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the event type)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures records from plain loggers still format with the trace_id field.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True
