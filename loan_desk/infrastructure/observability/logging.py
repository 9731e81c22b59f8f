"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional
from pythonjsonlogger.json import JsonFormatter

from loan_desk.config import settings
from loan_desk.domain.models import LoanApplication


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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_submission(request_id: str, application: LoanApplication) -> None:
    """Log structured intake outcome"""
    logging.info(
        "Application submitted",
        extra={
            "request_id": request_id,
            "application_id": application.id,
            "step": "intake_complete",
            "purpose": application.purpose,
            "loan_amount": str(application.loan_amount),
            "credit_score": application.credit_score,
        },
    )


def log_status_change(
    request_id: str,
    application_id: str,
    previous_status: str,
    new_status: str,
    actor: Optional[str] = None,
) -> None:
    """Log a review decision for audit"""
    logging.info(
        "Application status changed",
        extra={
            "request_id": request_id,
            "application_id": application_id,
            "step": "review_decision",
            "previous_status": previous_status,
            "new_status": new_status,
            "actor": actor or "anonymous",
        },
    )
