"""
Logging setup for the Job Board API.

JSON_LOGS=true emits one JSON object per record (production);
otherwise records are printed as plain text lines.
"""

import logging
import sys
from typing import Any, Dict
from datetime import datetime, timezone
from pythonjsonlogger import jsonlogger

# Third-party loggers that only matter when something goes wrong
QUIET_LOGGERS = {
    "boto3": logging.WARNING,
    "botocore": logging.WARNING,
    "urllib3": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    # passlib warns about reading the bcrypt version on every hash backend load
    "passlib": logging.ERROR,
}


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON formatter tagging every record with the service name.

    Warnings and errors also carry their source location.
    """

    def __init__(self, *args, service: str = "jobboard-api", **kwargs):
        super().__init__(*args, **kwargs)
        self.service = service

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)

        log_record['timestamp'] = datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat()
        log_record['service'] = self.service
        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        if record.levelno >= logging.WARNING:
            log_record['location'] = f"{record.module}.{record.funcName}:{record.lineno}"


def setup_logging(log_level: str = "INFO", json_logs: bool = False, service: str = "jobboard-api") -> None:
    """
    Replace the root handlers with a single stdout handler.

    Args:
        log_level: Level name; unknown names fall back to INFO
        json_logs: Emit JSON records instead of text lines
        service: Value of the "service" field in JSON records
    """
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        handler.setFormatter(CustomJsonFormatter('%(message)s', service=service))
    else:
        handler.setFormatter(logging.Formatter(
            f'%(asctime)s [{service}] %(levelname)s %(name)s: %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        ))

    level = logging.getLevelName(log_level.upper())
    root_logger.setLevel(level if isinstance(level, int) else logging.INFO)
    root_logger.addHandler(handler)

    for name, quiet_level in QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)
