"""
Structured logging configuration with correlation ID support.
Provides a JSON logging format suitable for log aggregation, with a
plain-text format for interactive runs.
"""

import json
import logging
import sys
import uuid
from contextvars import ContextVar
from datetime import datetime, timezone
from typing import Optional

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="")
batch_id_var: ContextVar[str] = ContextVar("batch_id", default="")


def generate_correlation_id() -> str:
    """Generate a new correlation ID."""
    return str(uuid.uuid4())


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Set correlation ID for the current context."""
    cid = correlation_id or generate_correlation_id()
    correlation_id_var.set(cid)
    return cid


def get_correlation_id() -> str:
    """Get correlation ID for the current context."""
    return correlation_id_var.get()


def set_batch_id(batch_id: str) -> None:
    """Set batch ID for the current context."""
    batch_id_var.set(batch_id)


def get_batch_id() -> str:
    """Get batch ID for the current context."""
    return batch_id_var.get()


class StructuredJsonFormatter(logging.Formatter):
    """
    JSON formatter for structured logging.
    One JSON object per line, carrying the run's correlation and batch IDs.
    """

    def __init__(self, service_name: str = "catalog-import"):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
            "correlation_id": get_correlation_id(),
            "batch_id": get_batch_id(),
        }

        if hasattr(record, "error"):
            log_data["error"] = record.error
        if hasattr(record, "metrics"):
            log_data["metrics"] = record.metrics

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__ if record.exc_info[0] else None,
                "message": str(record.exc_info[1]) if record.exc_info[1] else None,
            }

        return json.dumps(log_data, default=str)


class ContextualLogger(logging.LoggerAdapter):
    """
    Logger adapter that automatically includes contextual information.
    """

    def process(self, msg, kwargs):
        extra = kwargs.get("extra", {})
        extra["correlation_id"] = get_correlation_id()
        extra["batch_id"] = get_batch_id()
        kwargs["extra"] = extra
        return msg, kwargs


def configure_logging(
    level: str = "INFO",
    service_name: str = "catalog-import",
    json_logs: bool = False,
) -> ContextualLogger:
    """
    Configure logging for an import run.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        service_name: Name of the service for log identification
        json_logs: Emit one JSON object per line instead of plain text

    Returns:
        Configured contextual logger
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(log_level)

    if json_logs:
        handler.setFormatter(StructuredJsonFormatter(service_name))
    else:
        handler.setFormatter(
            logging.Formatter(
                "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"
            )
        )

    root_logger.addHandler(handler)

    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("requests").setLevel(logging.WARNING)

    return ContextualLogger(logging.getLogger(service_name), {})

