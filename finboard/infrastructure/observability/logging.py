"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger.json import JsonFormatter

from finboard.config import settings


class CustomJsonFormatter(JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_summary(
    request_id: str,
    user_id: str,
    variant: str,
    month: str,
    total: float,
    duration_ms: float,
) -> None:
    """Log a computed monthly summary"""
    logging.info(
        "Summary computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "summary_complete",
            "variant": variant,
            "month": month,
            "total": total,
            "duration_ms": duration_ms,
        },
    )


def log_mutation(request_id: str, user_id: str, record_type: str, operation: str, record_id: str) -> None:
    logging.info(
        f"{record_type} {operation}",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "record_type": record_type,
            "operation": operation,
            "record_id": record_id,
        },
    )
