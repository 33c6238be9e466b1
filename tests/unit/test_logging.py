"""Tests for structured logging."""

import json
import logging
from collections.abc import Iterator

import pytest
from pythonjsonlogger.json import JsonFormatter

from shared.logging import CustomJsonFormatter, benchmark_run_id_ctx, setup_logging


@pytest.fixture
def root_logger() -> Iterator[logging.Logger]:
    """Restore root logger state after setup_logging replaces it."""
    logger = logging.getLogger()
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.mark.unit
def test_setup_logging_emits_json(root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]) -> None:
    """Test records are rendered as JSON with level and logger fields."""
    setup_logging("debug")
    logging.getLogger("otpgen.test").info("hello", extra={"length": 6})

    record = json.loads(capsys.readouterr().out.strip())
    assert record["message"] == "hello"
    assert record["level"] == "INFO"
    assert record["logger"] == "otpgen.test"
    assert record["length"] == 6
    assert record.get("benchmark_run_id") is None
    assert root_logger.level == logging.DEBUG


@pytest.mark.unit
def test_setup_logging_adds_run_id(root_logger: logging.Logger, capsys: pytest.CaptureFixture[str]) -> None:
    """Test the benchmark run ID is attached when set in context."""
    setup_logging()
    token = benchmark_run_id_ctx.set("run-123")
    try:
        logging.getLogger("otpgen.test").info("tagged")
    finally:
        benchmark_run_id_ctx.reset(token)

    record = json.loads(capsys.readouterr().out.strip())
    assert record["benchmark_run_id"] == "run-123"


@pytest.mark.unit
def test_formatter_uses_current_json_module() -> None:
    """Test the formatter builds on pythonjsonlogger.json, not the deprecated jsonlogger alias."""
    assert issubclass(CustomJsonFormatter, JsonFormatter)
    assert JsonFormatter.__module__ == "pythonjsonlogger.json"
