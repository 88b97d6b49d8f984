"""
Log record data structure

A LogRecord is built once per emitted event and never mutated.
"""

from __future__ import annotations
from contextvars import Context
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional
import os
import traceback

from dlog.core.log_level import Level

_CORE_DIR = os.path.dirname(os.path.abspath(__file__)) + os.sep


@dataclass(frozen=True)
class LogRecord:
    """
    Immutable snapshot of one logging event.

    Attributes:
        level: Severity of the event
        message: Displayable form of ``object``
        logger_name: Full dotted name of the emitting logger
        time: Capture moment
        sequence_number: Emission order within the owning context
        error: Attached failure value, if any
        stack_trace: Attached stack trace, if any
        object: Raw message value before stringification
        execution_context: Ambient context active at the call site
    """

    level: Level
    message: str
    logger_name: str
    time: datetime
    sequence_number: int
    error: Any = None
    stack_trace: Any = None
    object: Any = None
    execution_context: Optional[Context] = None

    def __post_init__(self):
        """Validate log record after initialization."""
        if not isinstance(self.level, Level):
            raise TypeError("level must be Level enum")

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "logger_name": self.logger_name,
            "time": self.time.isoformat(),
            "sequence_number": self.sequence_number,
            "error": None if self.error is None else str(self.error),
            "stack_trace": format_stack_trace(self.stack_trace),
        }

    def __str__(self) -> str:
        """String representation."""
        return f"[{self.level.name}] {self.logger_name}: {self.message}"


def capture_stack_trace() -> traceback.StackSummary:
    """
    Capture the current call stack without dlog's own frames.

    Returns:
        Stack summary ending at the frame that called into the logger
    """
    frames = traceback.extract_stack()
    while frames and os.path.abspath(frames[-1].filename).startswith(_CORE_DIR):
        frames.pop()
    return frames


def format_stack_trace(stack_trace: Any) -> Optional[str]:
    """Render a stack summary, traceback object or any other value as text."""
    if stack_trace is None:
        return None
    if isinstance(stack_trace, traceback.StackSummary):
        return "".join(stack_trace.format())
    if hasattr(stack_trace, "tb_frame"):
        return "".join(traceback.format_tb(stack_trace))
    return str(stack_trace)
