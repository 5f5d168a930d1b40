"""Structured logging for ledger reports, driven by ``Settings.log_level``."""

from __future__ import annotations

import logging
import sys
from typing import IO

import structlog

from ledger_report.config import Settings

SERVICE_NAME = "ledger_report"


def _add_service(logger, method_name, event_dict):
    event_dict.setdefault("service", SERVICE_NAME)
    return event_dict


def resolve_level(log_level: str) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""
    level = logging.getLevelName(log_level.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {log_level}")
    return level


def setup_logging(settings: Settings | None = None, *, stream: IO[str] | None = None):
    """Configure structlog with JSON output, filtered at ``settings.log_level``.

    Should be called once by the embedding application. Output defaults to
    stderr since stdout usually carries the report itself.
    """
    settings = settings or Settings()
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            _add_service,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(resolve_level(settings.log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Return a bound logger for the given ledger_report module *name*."""
    return structlog.get_logger(name)
