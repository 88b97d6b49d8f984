"""Cancellable listener handle"""

from __future__ import annotations
from typing import Any, Callable, Optional


class Subscription:
    """
    Handle returned when a callback is subscribed to a logger.

    Cancelling removes exactly this callback from the list it was added
    to. Cancelling more than once does nothing.

    Example:
        sub = logger.subscribe(records.append)
        ...
        sub.cancel()

        with logger.subscribe(records.append):
            logger.info("only seen inside the block")
    """

    def __init__(
        self,
        callback: Callable[[Any], None],
        remover: Callable[["Subscription"], None],
    ):
        if not callable(callback):
            raise TypeError("callback must be callable")

        self.callback = callback
        self._remover: Optional[Callable[["Subscription"], None]] = remover

    @property
    def active(self) -> bool:
        """True until cancel() is called."""
        return self._remover is not None

    def cancel(self) -> None:
        """Stop delivery to this callback."""
        remover, self._remover = self._remover, None
        if remover is not None:
            remover(self)

    def __call__(self, value: Any) -> None:
        self.callback(value)

    def __enter__(self) -> "Subscription":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.cancel()

    def __repr__(self) -> str:
        """String representation."""
        callback_name = getattr(self.callback, '__name__', repr(self.callback))
        return f"Subscription(callback={callback_name}, active={self.active})"
