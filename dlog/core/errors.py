"""Error taxonomy for the logger hierarchy"""


class DlogError(Exception):
    """Base class for errors raised by dlog."""


class InvalidLoggerNameError(DlogError, ValueError):
    """Logger name has an empty dotted segment (leading, trailing or '..')."""

    def __init__(self, name: str):
        super().__init__(f"Invalid logger name: {name!r}")
        self.name = name


class UnsupportedOperationError(DlogError, RuntimeError):
    """Operation is not allowed for this logger in the current mode."""
