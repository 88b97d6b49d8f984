"""
Logging context

Process-wide state shared by a tree of loggers: the hierarchy toggle, the
stack trace threshold, the registry and the record sequence counter. Tests
build their own LoggingContext for isolation; everything else uses the
default one created at import time.
"""

from __future__ import annotations
from dataclasses import replace
from typing import Optional
import threading

from dlog.core.dlog_config import DlogConfig
from dlog.core.log_level import Level
from dlog.core.logger import Logger
from dlog.core.registry import LoggerRegistry


class LoggingContext:
    """
    Shared state for one logger hierarchy.

    Thread Safety:
        Registry creation, listener list updates, level changes and
        sequence numbers are serialized on ``lock``. Record delivery runs
        outside the lock.
    """

    def __init__(self, config: Optional[DlogConfig] = None):
        self._config = replace(config) if config is not None else DlogConfig.default()
        self.lock = threading.RLock()
        self._sequence = 0
        self.registry = LoggerRegistry(self)

    @property
    def config(self) -> DlogConfig:
        """Copy of the current settings; change them through the properties."""
        return replace(self._config)

    @property
    def hierarchical_logging_enabled(self) -> bool:
        return self._config.hierarchical_logging_enabled

    @hierarchical_logging_enabled.setter
    def hierarchical_logging_enabled(self, enabled: bool) -> None:
        if not isinstance(enabled, bool):
            raise TypeError("hierarchical_logging_enabled must be bool")
        with self.lock:
            self._config.hierarchical_logging_enabled = enabled

    @property
    def record_stack_trace_at_level(self) -> Level:
        return self._config.record_stack_trace_at_level

    @record_stack_trace_at_level.setter
    def record_stack_trace_at_level(self, level: Level) -> None:
        if not isinstance(level, Level):
            raise TypeError("record_stack_trace_at_level must be Level enum")
        with self.lock:
            self._config.record_stack_trace_at_level = level

    @property
    def default_level(self) -> Level:
        """Level given to root at creation and to every detached logger."""
        return self._config.default_level

    @property
    def root(self) -> Logger:
        return self.registry.root

    def get_logger(self, full_name: str = "") -> Logger:
        """Registry logger for full_name."""
        return self.registry.get_or_create(full_name)

    def detached(self, name: str) -> Logger:
        """New logger outside the registry."""
        return self.registry.create_detached(name)

    def next_sequence_number(self) -> int:
        """Allocate the next record sequence number."""
        with self.lock:
            number = self._sequence
            self._sequence += 1
            return number

    def get_metrics(self) -> dict:
        """Get context metrics."""
        with self.lock:
            return {"loggers": len(self.registry), "records": self._sequence}

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"LoggingContext(hierarchical={self.hierarchical_logging_enabled}, "
            f"stack_trace_at={self.record_stack_trace_at_level.name}, "
            f"root_level={self.root.level.name})"
        )


_default_context = LoggingContext()


def get_default_context() -> LoggingContext:
    """Context used by lookups that do not name one."""
    return _default_context


def set_default_context(context: LoggingContext) -> LoggingContext:
    """
    Replace the default context.

    Returns:
        The previous default context
    """
    global _default_context
    if not isinstance(context, LoggingContext):
        raise TypeError("context must be LoggingContext")
    previous, _default_context = _default_context, context
    return previous


def reset_default_context() -> LoggingContext:
    """Install a fresh default context and return it."""
    set_default_context(LoggingContext())
    return _default_context
