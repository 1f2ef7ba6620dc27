"""
PrintDesk - Structured Logging Configuration

JSON-formatted logging for the API and the dashboard client, plus a separate
audit trail for catalog and order changes.

Usage:
    from printdesk.logging_config import get_logger, audit_log

    logger = get_logger(__name__)
    logger.info("Orders refreshed", extra={"count": 42})

    audit_log("ORDER_CREATED", resource_type="order", resource_id=7,
              details={"status": "Contact"})
"""
import json
import logging
import logging.handlers
import os
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from printdesk.core.settings import settings


# Attributes every LogRecord carries; anything else came in through `extra=`
_RECORD_ATTRIBUTES = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "pathname", "process", "processName", "relativeCreated",
    "stack_info", "exc_info", "exc_text", "thread", "threadName",
    "taskName", "message",
})


def _extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRIBUTES
    }


class JSONFormatter(logging.Formatter):
    """
    Formats log records as JSON for log aggregation systems.

    Output format:
    {
        "timestamp": "2024-01-01T12:00:00+00:00",
        "level": "INFO",
        "logger": "printdesk.services.dashboard_state",
        "message": "Orders refreshed",
        "count": 42
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.levelno >= logging.ERROR:
            log_data["location"] = {
                "file": record.pathname,
                "line": record.lineno,
                "function": record.funcName,
            }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        for key, value in _extra_fields(record).items():
            try:
                json.dumps(value)
                log_data[key] = value
            except (TypeError, ValueError):
                log_data[key] = str(value)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """
    Human-readable formatter for development.

    2024-01-01 12:00:00 [INFO] printdesk.api.endpoints.orders: Order created order_id=7
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
        base_msg = f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"

        extras = [f"{key}={value}" for key, value in _extra_fields(record).items()]
        if extras:
            base_msg += " " + " ".join(extras)

        if record.exc_info:
            base_msg += "\n" + self.formatException(record.exc_info)

        return base_msg


class AuditFormatter(logging.Formatter):
    """
    Formats audit records.

    {
        "timestamp": "2024-01-01T12:00:00+00:00",
        "event": "FILAMENT_UPDATED",
        "resource_type": "filament",
        "resource_id": 3,
        "details": {...},
        "ip_address": "192.168.1.10"
    }
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "event": getattr(record, "event", record.getMessage()),
            "resource_type": getattr(record, "resource_type", None),
            "resource_id": getattr(record, "resource_id", None),
            "details": getattr(record, "details", {}),
            "ip_address": getattr(record, "ip_address", None),
        }

        log_data = {k: v for k, v in log_data.items() if v is not None}

        return json.dumps(log_data, default=str)


def _rotating_handler(path: str, max_bytes: int, backup_count: int) -> logging.Handler:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    return logging.handlers.RotatingFileHandler(
        path,
        maxBytes=max_bytes,
        backupCount=backup_count,
    )


def setup_logging() -> None:
    """
    Configure application logging based on settings.

    Call this once at application startup.
    """
    log_level = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

    if settings.LOG_FORMAT.lower() == "json":
        formatter = JSONFormatter()
    else:
        formatter = TextFormatter()

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)
    root_logger.addHandler(console_handler)

    if settings.LOG_FILE:
        file_handler = _rotating_handler(settings.LOG_FILE, 10 * 1024 * 1024, 5)
        file_handler.setFormatter(formatter)
        file_handler.setLevel(log_level)
        root_logger.addHandler(file_handler)

    setup_audit_logging()

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("urllib3").setLevel(logging.WARNING)


def setup_audit_logging() -> None:
    """Configure the separate audit logger for catalog and order changes."""
    audit_logger = logging.getLogger("audit")
    audit_logger.setLevel(logging.INFO)
    audit_logger.handlers.clear()
    audit_logger.propagate = False

    if settings.AUDIT_LOG_FILE:
        audit_handler = _rotating_handler(settings.AUDIT_LOG_FILE, 50 * 1024 * 1024, 10)
        audit_handler.setFormatter(AuditFormatter())
        audit_handler.setLevel(logging.INFO)
        audit_logger.addHandler(audit_handler)

    if settings.DEBUG:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(AuditFormatter())
        audit_logger.addHandler(console_handler)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: Module name (typically __name__)
    """
    return logging.getLogger(name)


def audit_log(
    event: str,
    *,
    resource_type: Optional[str] = None,
    resource_id: Optional[Any] = None,
    details: Optional[Dict[str, Any]] = None,
    ip_address: Optional[str] = None,
) -> None:
    """
    Record a change to orders or the colour/filament catalog.

    Args:
        event: Event name (e.g., "ORDER_CREATED", "FILAMENT_UPDATED")
        resource_type: "order", "colour" or "filament"
        resource_id: ID of the affected row
        details: Event-specific data
        ip_address: IP address of the request

    Example:
        audit_log(
            "FILAMENT_UPDATED",
            resource_type="filament",
            resource_id=3,
            details={"amount_used": 420.0},
        )
    """
    audit_logger = logging.getLogger("audit")
    audit_logger.info(
        event,
        extra={
            "event": event,
            "resource_type": resource_type,
            "resource_id": resource_id,
            "details": details or {},
            "ip_address": ip_address,
        },
    )


def get_client_ip(request) -> Optional[str]:
    """
    Extract client IP from a FastAPI request, honouring proxy headers.
    """
    x_forwarded_for = request.headers.get("X-Forwarded-For")
    if x_forwarded_for:
        return x_forwarded_for.split(",")[0].strip()

    x_real_ip = request.headers.get("X-Real-IP")
    if x_real_ip:
        return x_real_ip

    if request.client:
        return request.client.host

    return None
