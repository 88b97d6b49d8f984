"""
Logger - named node of the logger hierarchy

Loggers are obtained from a LoggingContext registry (singleton per full
dotted name) or created detached. Each logger filters emissions against its
effective level and hands accepted records to the dispatch rules.
"""

from __future__ import annotations
from contextvars import Context, copy_context
from datetime import datetime
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Dict, Mapping, Optional, Tuple

from dlog.core import dispatch
from dlog.core.errors import UnsupportedOperationError
from dlog.core.log_level import Level
from dlog.core.log_record import LogRecord, capture_stack_trace
from dlog.core.subscription import Subscription

if TYPE_CHECKING:
    from dlog.core.context import LoggingContext


class Logger:
    """
    Named node in the logger hierarchy.

    Loggers are not constructed directly: use ``Logger.get(name)``,
    ``Logger.get_root()`` or ``Logger.detached(name)``.

    Example:
        logger = Logger.get("app.db")
        sub = logger.subscribe(print)
        logger.info("connected")
        logger.debug(lambda: expensive_dump())  # only evaluated if loggable
        sub.cancel()
    """

    def __init__(
        self,
        name: str,
        parent: Optional["Logger"],
        context: "LoggingContext",
        level: Optional[Level] = None,
        detached: bool = False,
    ):
        self.name = name
        self.parent = parent
        self.context = context
        self._detached = detached
        self._level = level
        self._children: Dict[str, Logger] = {}
        self._children_view: Mapping[str, Logger] = MappingProxyType(self._children)
        self._listeners: Tuple[Subscription, ...] = ()
        self._level_listeners: Tuple[Subscription, ...] = ()

        if parent is None or parent.name == "":
            self.full_name = name
        else:
            self.full_name = f"{parent.full_name}.{name}"

    @classmethod
    def get(cls, full_name: str = "", context: Optional["LoggingContext"] = None) -> "Logger":
        """
        Get the registry logger for a full dotted name.

        Args:
            full_name: Dotted name, "" for root
            context: Owning context (default: process default context)

        Returns:
            The same instance for every call with the same name

        Raises:
            InvalidLoggerNameError: If the name has an empty segment
        """
        return _resolve_context(context).registry.get_or_create(full_name)

    @classmethod
    def get_root(cls, context: Optional["LoggingContext"] = None) -> "Logger":
        """Root logger of the context."""
        return _resolve_context(context).root

    @classmethod
    def detached(cls, name: str, context: Optional["LoggingContext"] = None) -> "Logger":
        """
        Create a logger outside the registry.

        The instance has no parent, never gains children and keeps its own
        level, starting at the context's default level, whatever the
        hierarchy mode.

        Raises:
            InvalidLoggerNameError: If the name has an empty segment
        """
        return _resolve_context(context).registry.create_detached(name)

    @property
    def children(self) -> Mapping[str, "Logger"]:
        """Read-only view of child loggers keyed by local name."""
        return self._children_view

    @property
    def is_root(self) -> bool:
        return self.parent is None and not self._detached

    @property
    def is_detached(self) -> bool:
        return self._detached

    def _add_child(self, child: "Logger") -> None:
        # Registry only, called with the context lock held
        self._children[child.name] = child

    @property
    def explicit_level(self) -> Optional[Level]:
        """Level set on this logger, None when inherited."""
        return self._level

    @property
    def level(self) -> Level:
        """Effective level after inheritance or flat-mode collapsing."""
        return dispatch.effective_level(self)

    @level.setter
    def level(self, value: Optional[Level]) -> None:
        self.set_level(value)

    def set_level(self, level: Optional[Level]) -> None:
        """
        Set the explicit level of this logger.

        Args:
            level: New level, or None to inherit from the parent

        Raises:
            UnsupportedOperationError: If hierarchical logging is disabled
                and this is a registry logger other than root, or if None
                is given for root or a detached logger
            TypeError: If level is neither a Level nor None
        """
        if level is not None and not isinstance(level, Level):
            raise TypeError("level must be Level enum or None")

        with self.context.lock:
            if self.parent is not None and not self.context.hierarchical_logging_enabled:
                raise UnsupportedOperationError(
                    f"Cannot set the level of {self.full_name!r} while "
                    f"hierarchical logging is disabled; set it on the root logger"
                )
            if self.parent is None and level is None:
                kind = "detached" if self._detached else "root"
                raise UnsupportedOperationError(f"Cannot set the {kind} logger level to None")

            changed = self._level != level
            self._level = level
            listeners = self._level_listeners

        if changed:
            for subscription in listeners:
                if subscription.active:
                    subscription(level)

    def is_loggable(self, level: Level) -> bool:
        """Whether an emission at ``level`` passes this logger's filter."""
        return level >= self.level

    def on_level_changed(self, callback: Callable[[Optional[Level]], None]) -> Subscription:
        """
        Subscribe to changes of this logger's explicit level.

        The callback receives the new explicit level (None when the
        logger goes back to inheriting).
        """
        subscription = Subscription(callback, self._remove_level_listener)
        with self.context.lock:
            self._level_listeners = self._level_listeners + (subscription,)
        return subscription

    def _remove_level_listener(self, subscription: Subscription) -> None:
        with self.context.lock:
            self._level_listeners = tuple(
                s for s in self._level_listeners if s is not subscription
            )

    def subscribe(self, callback: Callable[[LogRecord], None]) -> Subscription:
        """
        Subscribe to records delivered to this logger.

        With hierarchical logging disabled, registry loggers share root's
        listener list, so the callback is attached to root.

        Args:
            callback: Called with each LogRecord

        Returns:
            Handle whose cancel() stops delivery to this callback
        """
        owner = dispatch.listener_owner(self)
        subscription = Subscription(callback, owner._remove_listener)
        with self.context.lock:
            owner._listeners = owner._listeners + (subscription,)
        return subscription

    on_record = subscribe

    def _remove_listener(self, subscription: Subscription) -> None:
        with self.context.lock:
            self._listeners = tuple(s for s in self._listeners if s is not subscription)

    def clear_listeners(self) -> None:
        """Cancel every listener of this logger (root's in flat mode)."""
        owner = dispatch.listener_owner(self)
        with self.context.lock:
            listeners, owner._listeners = owner._listeners, ()
        for subscription in listeners:
            subscription.cancel()

    @property
    def listener_count(self) -> int:
        return len(dispatch.listener_owner(self)._listeners)

    def log(
        self,
        level: Level,
        message: Any,
        error: Any = None,
        stack_trace: Any = None,
        execution_context: Optional[Context] = None,
    ) -> Optional[LogRecord]:
        """
        Emit a record if ``level`` is loggable.

        Args:
            level: Severity of the event
            message: Message value, or a zero-argument callable producing it
                (called only when the level is loggable)
            error: Failure attached to the record
            stack_trace: Stack trace attached to the record
            execution_context: Context to record instead of the current one

        Returns:
            The delivered record, or None when filtered out

        Raises:
            TypeError: If level is not a Level
        """
        if not isinstance(level, Level):
            raise TypeError("level must be Level enum")

        if not self.is_loggable(level):
            return None

        obj = message() if callable(message) else message
        text = obj if isinstance(obj, str) else str(obj)

        if error is None and level >= self.context.record_stack_trace_at_level:
            if stack_trace is None:
                stack_trace = capture_stack_trace()
                error = f"autogenerated stack trace for {level.name} {text}"

        record = LogRecord(
            level=level,
            message=text,
            logger_name=self.full_name,
            time=datetime.now(),
            sequence_number=self.context.next_sequence_number(),
            error=error,
            stack_trace=stack_trace,
            object=obj,
            execution_context=(
                execution_context if execution_context is not None else copy_context()
            ),
        )

        dispatch.publish(self, record)
        return record

    def trace(self, message: Any, error: Any = None, stack_trace: Any = None,
              execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log trace message."""
        return self.log(Level.TRACE, message, error, stack_trace, execution_context)

    def debug(self, message: Any, error: Any = None, stack_trace: Any = None,
              execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log debug message."""
        return self.log(Level.DEBUG, message, error, stack_trace, execution_context)

    def info(self, message: Any, error: Any = None, stack_trace: Any = None,
             execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log info message."""
        return self.log(Level.INFO, message, error, stack_trace, execution_context)

    def warn(self, message: Any, error: Any = None, stack_trace: Any = None,
             execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log warning message."""
        return self.log(Level.WARN, message, error, stack_trace, execution_context)

    def error(self, message: Any, error: Any = None, stack_trace: Any = None,
              execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log error message."""
        return self.log(Level.ERROR, message, error, stack_trace, execution_context)

    def wtf(self, message: Any, error: Any = None, stack_trace: Any = None,
            execution_context: Optional[Context] = None) -> Optional[LogRecord]:
        """Log a failure that should never happen."""
        return self.log(Level.WTF, message, error, stack_trace, execution_context)

    t = trace
    d = debug
    i = info
    w = warn
    e = error

    def __repr__(self) -> str:
        """String representation."""
        kind = "detached " if self._detached else ""
        return f"<{kind}Logger {self.full_name!r} level={self.level.name}>"


def _resolve_context(context: Optional["LoggingContext"]) -> "LoggingContext":
    if context is not None:
        return context
    from dlog.core.context import get_default_context
    return get_default_context()
