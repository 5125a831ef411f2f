"""
Logging setup for the Job Board API.

Console output is plain text by default; with JSON_LOGS enabled every record
is a single JSON object carrying the service name and, for access logs, the
request method, path, status code and duration.
"""

import logging
import sys
import time
from typing import Any, Dict
from fastapi import Request
from pythonjsonlogger.json import JsonFormatter

from jobboard.core.config import settings

access_logger = logging.getLogger("jobboard.access")

# Extra attributes the access log attaches to its records
REQUEST_FIELDS = ("method", "path", "status_code", "duration_ms", "client_ip")

QUIET_LOGGERS = {
    "sqlalchemy.engine": logging.WARNING,
    "passlib": logging.ERROR,
    "botocore": logging.WARNING,
    "boto3": logging.WARNING,
    "s3transfer": logging.WARNING,
    "uvicorn.access": logging.WARNING,
}


class JobBoardJsonFormatter(JsonFormatter):
    """JSON formatter that stamps each record with the service and its origin."""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['service'] = settings.PROJECT_NAME
        log_record['version'] = settings.VERSION
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.module}.{record.funcName}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    """
    Install a single stdout handler on the root logger.

    Args:
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        json_logs: Emit JSON records instead of text lines
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(JobBoardJsonFormatter('%(asctime)s %(message)s', timestamp=True))
    else:
        handler.setFormatter(logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    root_logger.setLevel(getattr(logging, log_level.upper(), logging.INFO))
    root_logger.addHandler(handler)

    for name, level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(level)


async def log_requests(request: Request, call_next):
    """HTTP middleware writing one access log line per request."""
    start = time.perf_counter()
    response = await call_next(request)
    duration_ms = round((time.perf_counter() - start) * 1000, 2)

    extra = {
        "method": request.method,
        "path": request.url.path,
        "status_code": response.status_code,
        "duration_ms": duration_ms,
        "client_ip": request.client.host if request.client else None,
    }
    level = logging.WARNING if response.status_code >= 500 else logging.INFO
    access_logger.log(
        level,
        f"{request.method} {request.url.path} -> {response.status_code} ({duration_ms}ms)",
        extra=extra,
    )
    return response
