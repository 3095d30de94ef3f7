"""Structured JSON logging for metrics computations"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger import jsonlogger
from alliance_metrics.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: Optional[str] = None) -> None:
    """Configure structured JSON logging on the root logger"""
    logger = logging.getLogger()
    logger.setLevel(level or settings.log_level)

    # Remove existing handlers
    logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_snapshot(
    reference_date: str,
    alliance: Optional[str],
    record_count: int,
    player_count: int,
    demotion_risk_count: int,
    duration_ms: float,
) -> None:
    """Log structured snapshot outcome"""
    logging.info(
        "Snapshot completed",
        extra={
            "step": "snapshot_complete",
            "reference_date": reference_date,
            "alliance": alliance or "all",
            "record_count": record_count,
            "player_count": player_count,
            "demotion_risk_count": demotion_risk_count,
            "duration_ms": duration_ms,
        },
    )
