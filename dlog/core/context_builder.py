"""Logging context builder pattern"""

from dataclasses import replace

from dlog.core.context import LoggingContext
from dlog.core.dlog_config import DlogConfig
from dlog.core.log_level import Level


class LoggingContextBuilder:
    """
    Builder pattern for logging context construction.

    Example:
        context = (LoggingContextBuilder()
            .with_hierarchy()
            .with_stack_traces_at(Level.ERROR)
            .build())
        Logger.get("app.db", context).level = Level.DEBUG
    """

    def __init__(self):
        self._config = DlogConfig()

    def with_config(self, config: DlogConfig) -> "LoggingContextBuilder":
        """
        Start from an existing configuration.

        The configuration is copied, so later builder calls and the built
        context never change the caller's object.
        """
        self._config = replace(config)
        return self

    def with_hierarchy(self, enabled: bool = True) -> "LoggingContextBuilder":
        """Enable/disable hierarchical logging."""
        self._config.hierarchical_logging_enabled = enabled
        return self

    def with_stack_traces_at(self, level: Level) -> "LoggingContextBuilder":
        """Capture stack traces for emissions at or above level."""
        self._config.record_stack_trace_at_level = level
        return self

    def with_default_level(self, level: Level) -> "LoggingContextBuilder":
        """Set the level of root and of detached loggers."""
        self._config.default_level = level
        return self

    def build(self) -> LoggingContext:
        """Build and return configured context."""
        # Re-run validation on the collected settings
        config = DlogConfig(
            hierarchical_logging_enabled=self._config.hierarchical_logging_enabled,
            record_stack_trace_at_level=self._config.record_stack_trace_at_level,
            default_level=self._config.default_level,
        )
        return LoggingContext(config)
