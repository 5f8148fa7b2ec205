"""Structured logging setup."""

import logging
import sys
from typing import Optional

import structlog

from bundlbe.config import settings


def configure_logging(level: Optional[str] = None, json_output: Optional[bool] = None) -> None:
    """
    Configure structlog on top of the standard library logging module.
    
    Args:
        level: Logging level name, defaults to settings.log_level
        json_output: Render JSON lines instead of console output,
                     defaults to settings.log_json
    """
    level = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json
    
    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    
    renderer = structlog.processors.JSONRenderer() if json_output else structlog.dev.ConsoleRenderer()
    
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
