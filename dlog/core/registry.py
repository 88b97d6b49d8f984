"""
Logger registry

Maps full dotted names to logger instances and builds the parent chain.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Dict, List

from dlog.core.errors import InvalidLoggerNameError
from dlog.core.logger import Logger

if TYPE_CHECKING:
    from dlog.core.context import LoggingContext


class LoggerRegistry:
    """
    Owns every non-detached logger of a context.

    Thread Safety:
        Creation runs under the context lock, so concurrent lookups of the
        same name always return one instance.
    """

    def __init__(self, context: "LoggingContext"):
        self._context = context
        self._loggers: Dict[str, Logger] = {}
        self._root = Logger("", None, context, level=context.default_level)
        self._loggers[""] = self._root

    @property
    def root(self) -> Logger:
        return self._root

    @staticmethod
    def validate_name(name: str) -> None:
        """
        Check a full dotted logger name.

        Raises:
            TypeError: If name is not a string
            InvalidLoggerNameError: If a dotted segment is empty
        """
        if not isinstance(name, str):
            raise TypeError("logger name must be str")
        if name and "" in name.split("."):
            raise InvalidLoggerNameError(name)

    def get_or_create(self, full_name: str) -> Logger:
        """
        Return the logger registered under full_name, creating it and any
        missing ancestors first.
        """
        logger = self._loggers.get(full_name)
        if logger is not None:
            return logger

        self.validate_name(full_name)
        with self._context.lock:
            return self._create(full_name)

    def _create(self, full_name: str) -> Logger:
        logger = self._loggers.get(full_name)
        if logger is not None:
            return logger

        parent_name, _, name = full_name.rpartition(".")
        parent = self._create(parent_name)
        logger = Logger(name, parent, self._context)
        parent._add_child(logger)
        self._loggers[full_name] = logger
        return logger

    def create_detached(self, name: str) -> Logger:
        """Create an unregistered logger with the default level."""
        self.validate_name(name)
        return Logger(name, None, self._context, level=self._context.default_level, detached=True)

    def names(self) -> List[str]:
        """Registered full names, root included."""
        with self._context.lock:
            return list(self._loggers)

    def __contains__(self, full_name: str) -> bool:
        return full_name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)
