# app/logging_config.py
from __future__ import annotations
import logging
import sys
from typing import Optional, TextIO
import structlog

def configure_logging(debug: bool = False, stream: Optional[TextIO] = None) -> None:
    level = logging.DEBUG if debug else logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            # one JSON object per line; keeps room output on stdout clean
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )

    # route stdlib logging -> same stream
    logging.basicConfig(format="%(message)s", stream=stream or sys.stderr, level=level, force=True)
