"""Observability - structured logging."""

from .logger import LogContext, add_context, configure_logging

__all__ = [
    "configure_logging",
    "add_context",
    "LogContext",
]
