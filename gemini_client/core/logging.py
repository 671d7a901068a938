"""Structured logging setup using structlog."""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import structlog

# httpx and httpcore log full request URLs, which carry the API key
TRANSPORT_LOGGERS = ("httpx", "httpcore")

_KEY_PARAM = re.compile(r"([?&]key=)[^&\s\"']+")


def redact_api_key(logger: Any, method_name: str, event_dict: dict) -> dict:
    """Mask ``key=`` query parameters in any string value of the event."""
    for name, value in event_dict.items():
        if isinstance(value, str) and "key=" in value:
            event_dict[name] = _KEY_PARAM.sub(r"\1***", value)
    return event_dict


def setup_logging(log_level: str = "INFO", json_logs: bool = False) -> None:
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, stream=sys.stderr, format="%(message)s")
    for name in TRANSPORT_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", key="ts"),
        redact_api_key,
    ]

    if json_logs:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> Any:
    return structlog.get_logger(name)
