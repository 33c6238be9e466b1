"""Structured JSON logging configuration."""

import logging
import sys
from contextvars import ContextVar
from typing import Any

from pythonjsonlogger.json import JsonFormatter

# Context variable for correlating records from one benchmark run
benchmark_run_id_ctx: ContextVar[str | None] = ContextVar("benchmark_run_id", default=None)


class CorrelationIdFilter(logging.Filter):
    """Add correlation IDs to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        """Add correlation IDs from context to log record."""
        record.benchmark_run_id = benchmark_run_id_ctx.get()  # type: ignore[attr-defined]
        return True


class CustomJsonFormatter(JsonFormatter):  # type: ignore[misc]
    """Custom JSON formatter with correlation IDs."""

    def add_fields(  # type: ignore[override]
        self, log_record: dict[str, Any], record: logging.LogRecord, message_dict: dict[str, Any]
    ) -> None:
        """Add custom fields to the log record."""
        super().add_fields(log_record, record, message_dict)

        if getattr(record, "benchmark_run_id", None):
            log_record["benchmark_run_id"] = record.benchmark_run_id  # type: ignore[attr-defined]

        log_record["level"] = record.levelname
        log_record["logger"] = record.name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging."""
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter("%(asctime)s %(name)s %(levelname)s %(message)s")
    handler.setFormatter(formatter)
    handler.addFilter(CorrelationIdFilter())

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(level.upper())
