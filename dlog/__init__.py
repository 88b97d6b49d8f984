"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

dlog - Hierarchical, level-filtered logging with synchronous listener
fan-out
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from dlog.core.log_level import Level
from dlog.core.errors import DlogError, InvalidLoggerNameError, UnsupportedOperationError
from dlog.core.log_record import LogRecord
from dlog.core.subscription import Subscription
from dlog.core.dlog_config import DlogConfig
from dlog.core.logger import Logger
from dlog.core.context import (
    LoggingContext,
    get_default_context,
    reset_default_context,
    set_default_context,
)
from dlog.core.context_builder import LoggingContextBuilder


def get_logger(name: str = "") -> Logger:
    """Registry logger of the default context, root for ""."""
    return Logger.get(name)


__all__ = [
    "Level",
    "DlogError",
    "InvalidLoggerNameError",
    "UnsupportedOperationError",
    "LogRecord",
    "Subscription",
    "DlogConfig",
    "Logger",
    "LoggingContext",
    "LoggingContextBuilder",
    "get_default_context",
    "set_default_context",
    "reset_default_context",
    "get_logger",
]
