"""Logging setup for the fare service."""

import logging
import sys

from magical_miles.app_logging.filters import PIIFilter
from magical_miles.app_logging.formatters import JSONFormatter, TextFormatter
from magical_miles.core.correlation import CorrelationFilter


def setup_logging(
    level: str = "INFO",
    json_output: bool = False,
    environment: str = "development",
) -> None:
    """Configure root logger with formatting, PII masking and correlation IDs."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)

    if json_output:
        handler.setFormatter(JSONFormatter(environment))
    else:
        handler.setFormatter(TextFormatter())

    handler.addFilter(CorrelationFilter())
    handler.addFilter(PIIFilter())

    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    # Quiet noisy libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("google_genai").setLevel(logging.WARNING)


__all__ = ["PIIFilter", "setup_logging"]
