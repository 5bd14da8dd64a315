"""Structured logging configuration (structlog)."""

from __future__ import annotations

import logging
import sys

import structlog


def configure_structlog(*, quiet: bool = False) -> None:
    """Configure structlog for human-readable diagnostics on stderr.

    stdout carries the statistics, so every log event goes to stderr.
    With *quiet* only critical events get through, which silences the
    per-line and per-file diagnostics.

    Call once at process startup.
    """
    level = logging.CRITICAL if quiet else logging.WARNING
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )
