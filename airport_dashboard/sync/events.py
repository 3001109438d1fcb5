"""
Minimal observer support for dashboard state changes.

An `EventEmitter` keeps a list of callbacks. Subscribing returns a
`Subscription` handle that releases the callback on `close()`, and can be
used as a context manager so the release happens when a view is torn down.
"""

from typing import Any, Callable, List, Optional
import logging

logger = logging.getLogger(__name__)

Listener = Callable[..., None]


class Subscription:
    """
    Handle for one registered listener.

    Examples:
        >>> with coordinator.on_selection_change(redraw):
        ...     coordinator.select("3")   # redraw is called
        >>> coordinator.select("3")       # redraw is no longer called
    """

    def __init__(self, emitter: 'EventEmitter', listener: Listener):
        self._emitter: Optional['EventEmitter'] = emitter
        self._listener = listener

    @property
    def active(self) -> bool:
        return self._emitter is not None

    def close(self) -> None:
        """Release the listener. Closing twice is harmless."""
        if self._emitter is None:
            return
        self._emitter._remove(self._listener)
        self._emitter = None

    def __enter__(self) -> 'Subscription':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False


class EventEmitter:
    """Synchronous fan-out of one kind of event to its listeners."""

    def __init__(self, name: str):
        self.name = name
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> Subscription:
        """
        Register a listener.

        Args:
            listener: Callable invoked with the event payload

        Returns:
            Subscription that removes the listener when closed
        """
        self._listeners.append(listener)
        logger.debug(f"Listener added to '{self.name}' ({len(self._listeners)} total)")
        return Subscription(self, listener)

    def emit(self, *args: Any) -> None:
        # Iterate over a copy so listeners may unsubscribe while being notified.
        for listener in list(self._listeners):
            # Released by an earlier listener during this emit
            if listener not in self._listeners:
                continue
            listener(*args)

    def clear(self) -> None:
        self._listeners.clear()

    def _remove(self, listener: Listener) -> None:
        try:
            self._listeners.remove(listener)
        except ValueError:
            # Already dropped by clear()
            return
        logger.debug(f"Listener removed from '{self.name}' ({len(self._listeners)} left)")

    def __len__(self) -> int:
        return len(self._listeners)
