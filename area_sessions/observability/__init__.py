"""
Observability module.

Provides logging configuration and safe structured logging helpers.
"""

from area_sessions.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from area_sessions.observability.logger import configure_logging

__all__ = [
    "configure_logging",
    "log_exception_with_context",
    "log_with_context",
    "safe_log_value",
]
