"""
Logging for the support relay.

The root logger is set up once on import; modules only ask for a named
logger:

    from support_relay.logging import get_logger
    logger = get_logger(__name__)

Ticket ids, questions and Bot API descriptions reach the logs from
untrusted sources, so pass them through the sanitize helpers first.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_SIMPLE = "%(levelname)s - %(name)s - %(message)s"

# Transport loggers under the Bot API client and supabase-py (httpx over HTTP/2)
QUIET_LOGGERS = ("httpx", "httpcore", "hpack")

LOG_ID_LENGTH = 8  # same as the short ticket id in reply buttons


def _configure_root_logger() -> None:
    root = logging.getLogger()
    if root.handlers:
        return

    level_name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    # Vercel timestamps every line itself
    handler.setFormatter(
        logging.Formatter(LOG_FORMAT_SIMPLE if os.environ.get("VERCEL") == "1" else LOG_FORMAT)
    )
    root.addHandler(handler)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    """Named logger, typically ``get_logger(__name__)``."""
    return logging.getLogger(name)


def _escape(value: str) -> str:
    # CWE-117: a newline in a question must not start a fake log entry
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """Escaped ticket/user id cut to 8 chars, or "N/A"."""
    if id_value is None or id_value == "":
        return "N/A"
    return _escape(str(id_value))[:LOG_ID_LENGTH]


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """
    Escaped free text (question, token, Bot API description) for a log line.

    Longer values are cut to ``max_length`` and marked with "...".
    """
    if not value:
        return "N/A"
    safe_value = _escape(str(value))
    if len(safe_value) <= max_length:
        return safe_value
    return safe_value[:max_length] + "..."


__all__ = [
    "LOG_FORMAT",
    "LOG_FORMAT_SIMPLE",
    "get_logger",
    "sanitize_id_for_logging",
    "sanitize_string_for_logging",
]
