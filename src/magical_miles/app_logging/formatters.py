"""Log formatters for JSON and human-readable output."""

import json
import logging
from datetime import UTC, datetime

SERVICE_NAME = "magical-miles-fares"

TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [corr=%(correlation_id)s] %(message)s"


class JSONFormatter(logging.Formatter):
    """One JSON object per line for log shipping."""

    def __init__(self, environment: str = "development"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, "correlation_id", "-"),
            "service_name": SERVICE_NAME,
            "environment": self.environment,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


class TextFormatter(logging.Formatter):
    """Human-readable format for local development."""

    def __init__(self) -> None:
        super().__init__(fmt=TEXT_FORMAT)
