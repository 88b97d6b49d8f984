"""
Level resolution and record propagation rules

With hierarchical logging disabled every registry logger filters with
root's level and records are delivered to root's listeners only. With it
enabled each logger resolves its own level (inheriting upward) and records
travel from the emitting logger up to root, visiting every node once.
Detached loggers always behave as the root of their own one-node tree.
"""

from __future__ import annotations
from typing import TYPE_CHECKING, Iterator

from dlog.core.log_level import Level
from dlog.core.log_record import LogRecord

if TYPE_CHECKING:
    from dlog.core.logger import Logger


def effective_level(logger: "Logger") -> Level:
    """Level used to decide whether ``logger`` accepts an emission."""
    if logger.parent is None:
        return logger.explicit_level

    context = logger.context
    if not context.hierarchical_logging_enabled:
        return context.root.explicit_level

    node = logger
    while node.explicit_level is None:
        node = node.parent
    return node.explicit_level


def listener_owner(logger: "Logger") -> "Logger":
    """Logger whose listener list ``logger.subscribe`` writes to."""
    if logger.parent is None or logger.context.hierarchical_logging_enabled:
        return logger
    return logger.context.root


def delivery_chain(logger: "Logger") -> Iterator["Logger"]:
    """Yield the loggers that receive a record emitted by ``logger``, in order."""
    if logger.parent is None:
        yield logger
        return

    context = logger.context
    if not context.hierarchical_logging_enabled:
        yield context.root
        return

    node = logger
    while node is not None:
        yield node
        node = node.parent


def publish(logger: "Logger", record: LogRecord) -> None:
    """
    Deliver ``record`` to every listener along the delivery chain.

    Listeners run synchronously on the caller's thread. An exception raised
    by a listener propagates to the caller of ``log`` and the remaining
    listeners are not called for this record.
    """
    for node in delivery_chain(logger):
        # Snapshot: subscribe/cancel from a listener must not disturb us
        for subscription in node._listeners:
            if subscription.active:
                subscription(record)
