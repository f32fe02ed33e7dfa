"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from rentledger.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Route all log records through one JSON handler on stdout"""
    root = logging.getLogger()
    root.setLevel(level.upper())
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(CustomJsonFormatter("%(timestamp)s %(level)s %(name)s %(message)s"))
    root.addHandler(handler)

    # httpx logs every upstream request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def log_score_computed(
    request_id: str,
    user_id: str,
    rent_score: int,
    payment_streak: int,
    payment_count: int,
    duration_ms: float,
) -> None:
    """Log structured rent score outcome for analysis"""
    logging.info(
        "Rent score computed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "score_complete",
            "rent_score": rent_score,
            "payment_streak": payment_streak,
            "payment_count": payment_count,
            "duration_ms": duration_ms,
        },
    )
