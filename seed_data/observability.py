"""Structured logging setup for the seed-data command line.

Logs go to stderr so generated CSV/JSON on stdout can be piped safely.
"""

from __future__ import annotations

import logging
import sys

import structlog

LOG_LEVELS = ("debug", "info", "warning", "error")


def configure_logging(level: str = "info", *, json_output: bool = False) -> None:
    """Configure structlog with level filtering, ISO timestamps and a renderer.

    Args:
        level: Minimum level name (debug, info, warning, error)
        json_output: Emit one JSON object per line instead of console text
    """
    if level.lower() not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}; expected one of {LOG_LEVELS}")
    numeric_level = getattr(logging, level.upper())

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )
