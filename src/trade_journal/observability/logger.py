"""Structured logging for the trade-journal CLI.

structlog renders JSON or console lines on stderr.  Per-invocation context
(the trace id and, once a journal is read, its path, trade count and
starting balance) lives in structlog's contextvars, so every line emitted
while a command runs carries it without threading loggers through calls.
"""

from __future__ import annotations

import logging
import sys
import uuid
from decimal import Decimal
from pathlib import Path
from typing import Any

import structlog
from structlog.contextvars import bind_contextvars, clear_contextvars, get_contextvars


def new_trace_id() -> str:
    """Generate a trace ID and bind it to the current context."""
    tid = str(uuid.uuid4())
    bind_contextvars(trace_id=tid)
    return tid


def get_trace_id() -> str:
    """Current trace ID, creating one if the context has none yet."""
    return get_contextvars().get("trace_id") or new_trace_id()


def reset_context() -> str:
    """Drop context from a previous invocation and start a new trace."""
    clear_contextvars()
    return new_trace_id()


def bind_journal(
    path: str | Path,
    *,
    trades: int,
    starting_balance: Decimal | None = None,
) -> None:
    """Attach the journal being processed to every subsequent log line."""
    fields: dict[str, Any] = {"journal": str(path), "trades": trades}
    if starting_balance is not None:
        fields["starting_balance"] = str(starting_balance)
    bind_contextvars(**fields)


def _add_trace_id(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Structlog processor: make sure every entry has a trace_id."""
    event_dict.setdefault("trace_id", get_trace_id())
    return event_dict


def setup_logging(
    level: str = "INFO",
    format: str = "console",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        format: "json" for machine consumption, "console" for humans.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.filter_by_level,
        _add_trace_id,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]

    if format == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # Log output goes to stderr so stdout stays clean for command results.
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a structured logger for a module."""
    return structlog.get_logger(name)
