"""
Core module for dlog

This module contains the fundamental classes:
- Logger: Named node of the logger hierarchy
- LogRecord: Immutable record of one logging event
- Level: Log level enumeration
- LoggingContext: Shared state of a logger hierarchy
- DlogConfig: Configuration of a logging context
"""

from dlog.core.log_level import Level
from dlog.core.errors import DlogError, InvalidLoggerNameError, UnsupportedOperationError
from dlog.core.log_record import LogRecord
from dlog.core.subscription import Subscription
from dlog.core.dlog_config import DlogConfig
from dlog.core.logger import Logger
from dlog.core.registry import LoggerRegistry
from dlog.core.context import (
    LoggingContext,
    get_default_context,
    reset_default_context,
    set_default_context,
)
from dlog.core.context_builder import LoggingContextBuilder

__all__ = [
    "Level",
    "DlogError",
    "InvalidLoggerNameError",
    "UnsupportedOperationError",
    "LogRecord",
    "Subscription",
    "DlogConfig",
    "Logger",
    "LoggerRegistry",
    "LoggingContext",
    "LoggingContextBuilder",
    "get_default_context",
    "set_default_context",
    "reset_default_context",
]
