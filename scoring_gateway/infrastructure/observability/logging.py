"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from scoring_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
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

    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_score(
    request_id: str,
    account_id: str,
    model: str,
    total_score: int,
    risk_level: str,
    transaction_count: int,
    duration_ms: float,
) -> None:
    """Log structured score outcome for analysis"""
    logging.info(
        "Score calculated",
        extra={
            "request_id": request_id,
            "account_id": account_id,
            "step": "score_complete",
            "model": model,
            "total_score": total_score,
            "risk_level": risk_level,
            "transaction_count": transaction_count,
            "duration_ms": duration_ms,
        },
    )
