"""Structured JSON logging for calculation observability"""

import logging
import sys
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, TextIO

from pythonjsonlogger.json import JsonFormatter

from finance_calculator.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO", stream: TextIO | None = None) -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # stderr by default, stdout belongs to the interactive console
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


class StructuredCalculationLogger:
    """CalculationLogger that writes calculation events as structured log records"""

    def __init__(self, name: str = "finance_calculator.calculations"):
        self.logger = logging.getLogger(name)

    def log_calculation(self, operation: str, input_amount: Decimal) -> None:
        self.logger.info(
            "Calculation started",
            extra={
                "step": "calculation_started",
                "operation": operation,
                "input_amount": str(input_amount),
            },
        )

    def log_success(self, message: str) -> None:
        self.logger.info(message, extra={"step": "calculation_complete"})

    def log_error(self, message: str) -> None:
        self.logger.error(message, extra={"step": "calculation_failed"})
