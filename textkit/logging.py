"""Structured JSON logging helper."""
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from textkit.settings import settings

LOGGER_NAME = "textkit"

# Extra record attributes copied into the JSON payload when present.
EXTRA_FIELDS = (
    "request_id",
    "upstream_trace_id",
    "operation",
    "location",
    "timing_ms",
    "score",
    "input_lens",
    "item_count",
    "errors_count",
    "version",
)


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logs."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for field in EXTRA_FIELDS:
            if hasattr(record, field):
                log_data[field] = getattr(record, field)

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_logging() -> logging.Logger:
    """Set up JSON logging."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JSONFormatter())
    logger.addHandler(handler)

    logger.propagate = False

    return logger


def get_logger() -> logging.Logger:
    """Get the application logger."""
    return logging.getLogger(LOGGER_NAME)


def log_operation_result(
    logger: logging.Logger,
    request_id: str,
    upstream_trace_id: Optional[str],
    operation: str,
    timing_ms: Dict[str, float],
    score: Optional[float] = None,
    input_lens: Optional[List[int]] = None,
    item_count: Optional[int] = None,
    level: int = logging.INFO,
):
    """Log structured result of one completed operation."""
    extra: Dict[str, Any] = {
        "request_id": request_id,
        "upstream_trace_id": upstream_trace_id,
        "operation": operation,
        "timing_ms": timing_ms,
    }
    if score is not None:
        extra["score"] = score
    if input_lens is not None:
        extra["input_lens"] = input_lens
    if item_count is not None:
        extra["item_count"] = item_count

    logger.log(level, "Request completed", extra=extra)
