"""
Logging context configuration

Holds the process-wide knobs shared by every logger of a context.
"""

from dataclasses import dataclass

from dlog.core.log_level import Level


@dataclass
class DlogConfig:
    """
    Logging context configuration.

    Attributes:
        hierarchical_logging_enabled: Per-logger levels and propagation
            up the ancestor chain when True; root-only levels and
            delivery when False
        record_stack_trace_at_level: Emissions at or above this level get
            a captured stack trace
        default_level: Level given to root and to detached loggers
    """

    hierarchical_logging_enabled: bool = False
    record_stack_trace_at_level: Level = Level.OFF
    default_level: Level = Level.INFO

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.hierarchical_logging_enabled, bool):
            raise TypeError("hierarchical_logging_enabled must be bool")

        # Accept level names as they appear in config files
        if isinstance(self.record_stack_trace_at_level, str):
            self.record_stack_trace_at_level = Level.from_string(
                self.record_stack_trace_at_level
            )
        if isinstance(self.default_level, str):
            self.default_level = Level.from_string(self.default_level)

        if not isinstance(self.record_stack_trace_at_level, Level):
            raise TypeError("record_stack_trace_at_level must be Level enum")
        if not isinstance(self.default_level, Level):
            raise TypeError("default_level must be Level enum")

    @classmethod
    def default(cls) -> "DlogConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "DlogConfig":
        """Create configuration for debugging."""
        return cls(
            hierarchical_logging_enabled=True,
            record_stack_trace_at_level=Level.ERROR,
            default_level=Level.TRACE,
        )

    @classmethod
    def production_config(cls) -> "DlogConfig":
        """Create configuration for production."""
        return cls(
            hierarchical_logging_enabled=False,
            record_stack_trace_at_level=Level.ERROR,
            default_level=Level.WARN,
        )
