"""
Structured Logging Utilities

Logging setup for the app and a context-carrying adapter for request logs.
"""

from __future__ import annotations

import logging
from typing import Any

STRUCTURED_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] [%(context)s] %(message)s"


class _ContextDefaultFilter(logging.Filter):
    """Fill in ``context`` for records that did not come through the adapter."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "context"):
            record.context = "none"
        return True


class StructuredLoggerAdapter(logging.LoggerAdapter):
    """
    Logger adapter that adds structured context to log messages.

    Usage:
        logger = get_structured_logger(__name__, user="a@b.com", query="python")
        logger.info("Searching jobs")
    """

    def __init__(self, logger: logging.Logger, **context: Any):
        super().__init__(logger, context)

    def process(self, msg: str, kwargs: dict[str, Any]) -> tuple[str, dict[str, Any]]:
        context_parts = [f"{key}={value}" for key, value in self.extra.items() if value is not None]
        kwargs.setdefault("extra", {})["context"] = " | ".join(context_parts) or "none"
        return msg, kwargs


def get_structured_logger(name: str, **context: Any) -> StructuredLoggerAdapter:
    """
    Get a structured logger with context.

    Args:
        name: Logger name (typically __name__)
        **context: Context fields (e.g., user="a@b.com", query="python")

    Returns:
        StructuredLoggerAdapter instance
    """
    return StructuredLoggerAdapter(logging.getLogger(name), **context)


def configure_logging(level: str | int = "INFO") -> None:
    """Configure the root logger with the structured format.

    Safe to call more than once; handlers are only added the first time.
    """
    if isinstance(level, str):
        level = getattr(logging, level.upper(), logging.INFO)

    root = logging.getLogger()
    root.setLevel(level)
    if any(getattr(h, "_quickhire", False) for h in root.handlers):
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(STRUCTURED_FORMAT))
    handler.addFilter(_ContextDefaultFilter())
    handler._quickhire = True
    root.addHandler(handler)
