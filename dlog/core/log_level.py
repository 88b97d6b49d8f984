"""
Log level enumeration

Levels are ordered by declaration position. OFF is the filter sentinel.
"""

from enum import IntEnum
from typing import Dict


class Level(IntEnum):
    """
    Log level enumeration.

    Values are compatible with Python's logging module, so declaration
    order and numeric order agree.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    WTF = 50        # Failures that should never happen
    OFF = 100       # Logging disabled

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @property
    def index(self) -> int:
        """Declaration position, 0 for TRACE."""
        return _LEVEL_INDEX[self]

    def compare_to(self, other: "Level") -> int:
        """
        Three-way comparison on declaration position.

        Args:
            other: Level to compare against

        Returns:
            Negative, zero or positive integer
        """
        return self.index - Level(other).index

    @classmethod
    def from_string(cls, level_str: str) -> "Level":
        """
        Convert string to Level.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            Level enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.strip().upper()
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


_LEVEL_INDEX: Dict[Level, int] = {level: i for i, level in enumerate(Level)}
