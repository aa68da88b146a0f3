"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, List
from pythonjsonlogger import jsonlogger

from expensify_gateway.config import settings


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

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_evaluation(
    request_id: str,
    user_id: str,
    safety_level: str,
    risk_score: int,
    category_spikes: List[str],
    impulse_pattern: bool,
    abnormal_velocity: bool,
    duration_ms: float,
) -> None:
    """Log structured engine outcome for analysis"""
    logging.info(
        "Evaluation completed",
        extra={
            "request_id": request_id,
            "user_id": user_id,
            "step": "evaluation_complete",
            "safety_level": safety_level,
            "risk_score": risk_score,
            "category_spikes": category_spikes,
            "impulse_pattern": impulse_pattern,
            "abnormal_velocity": abnormal_velocity,
            "duration_ms": duration_ms,
        },
    )
