"""
Logging for the calls assistant.

Events are snake_case names with key/value context, rendered by structlog:
one JSON object per line normally, colored console output with DEBUG=True.
Chat text only appears when LOG_CHAT_MESSAGES is on; see truncate_for_log.
"""

import logging
import sys
from typing import Any
import structlog
from calls_assistant.config import config


def configure_logging():
    """Route stdlib logging and structlog through one stdout handler."""

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO),
    )

    # httpx (terminal client, TestClient) and uvicorn access logs would repeat
    # every chat request at INFO.
    for noisy_logger in ["httpx", "httpcore", "uvicorn.access"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if config.DEBUG:
        # Readable in a terminal next to scripts/text_chat.py
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str = None) -> Any:
    """
    Get a structured logger instance.

    Usage:
        logger = get_logger(__name__)
        logger.info("chat_intent_matched", intent="mark_complete", action="update_call")
        logger.warning("chat_request_failed", error="connection refused")
    """
    return structlog.get_logger(name)


def truncate_for_log(text: str) -> str:
    """Clip user supplied text to the configured log length."""
    limit = config.LOG_CHAT_MESSAGES_MAX_CHARS
    if len(text) <= limit:
        return text
    return text[:limit] + "..."


configure_logging()

logger = get_logger("calls_assistant")
