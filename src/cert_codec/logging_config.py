"""
Logging setup — structlog configuration for applications embedding the codec.

The library modules only call structlog.get_logger(); the embedding
application calls configure_structlog() once at startup.
"""

from __future__ import annotations

import logging

import structlog

from cert_codec.config import CodecSettings


def configure_structlog(log_level: str = "INFO", log_format: str = "console") -> None:
    """
    Configure structlog for structured logging.

    log_format="json": JSON lines to stdout (machine-readable).
    log_format="console": colored, human-readable console output.
    Unknown level names fall back to INFO.
    """
    renderer: structlog.types.Processor = (
        structlog.processors.JSONRenderer() if log_format == "json" else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )


def configure_from_settings(settings: CodecSettings) -> None:
    configure_structlog(settings.log_level, settings.log_format)
