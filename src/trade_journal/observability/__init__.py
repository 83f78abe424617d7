"""Logging setup for the trade journal."""

from .logger import (
    bind_journal,
    get_logger,
    get_trace_id,
    new_trace_id,
    reset_context,
    setup_logging,
)

__all__ = [
    "bind_journal",
    "get_logger",
    "get_trace_id",
    "new_trace_id",
    "reset_context",
    "setup_logging",
]
