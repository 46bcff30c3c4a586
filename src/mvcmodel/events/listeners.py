"""Thread-safe listener registry.

ListenerList holds the callables subscribed to a single event name and
delivers payloads to them in registration order. EventHandler keeps one
ListenerList per event name.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Callable[..., Any])


class ListenerList(Generic[T]):
    """
    Ordered listener list with thread-safe registration and notification.

    Type Parameters:
        T: The listener callable type

    Thread Safety:
        All operations are thread-safe. The lock is released before calling
        listeners so a listener may subscribe or unsubscribe while being
        notified without deadlocking.

    Example:
        ```python
        listeners = ListenerList[Callable[[int], None]](name="change:volume")
        listeners.register(print)
        listeners.notify(11)
        ```
    """

    def __init__(self, lock: Lock | None = None, name: str = "listener"):
        """
        Initialize the listener list.

        Args:
            lock: Optional threading lock to use. If None, creates a new lock.
            name: Name used in log messages (usually the event name)
        """
        self._listeners: list[T] = []
        self._lock = lock or Lock()
        self._name = name

    def register(self, listener: T) -> None:
        """
        Register a listener (idempotent - won't add duplicates).

        Args:
            listener: The callable to register
        """
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)
                logger.info(f"Registered {self._name} listener: {listener}")
            else:
                logger.debug(f"{self._name} listener already registered: {listener}")

    def unregister(self, listener: T) -> None:
        """
        Unregister a listener.

        Args:
            listener: The callable to unregister
        """
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)
                logger.debug(f"Unregistered {self._name} listener: {listener}")
            else:
                logger.warning(f"Attempted to unregister unknown {self._name} listener: {listener}")

    def notify(self, *args: Any, **kwargs: Any) -> None:
        """
        Call every registered listener with the given arguments.

        The list is copied under the lock, then listeners run without it,
        synchronously and in registration order.

        Error Handling:
            Exceptions raised by a listener are logged and do not prevent
            delivery to the remaining listeners.
        """
        with self._lock:
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(*args, **kwargs)
            except Exception as e:
                logger.error(
                    f"Error notifying {self._name} listener {listener}: {e}",
                    exc_info=True,
                )

    def clear(self) -> None:
        """Remove all registered listeners."""
        with self._lock:
            count = len(self._listeners)
            self._listeners.clear()
            if count > 0:
                logger.info(f"Cleared {count} {self._name} listener(s)")

    def __contains__(self, listener: T) -> bool:
        with self._lock:
            return listener in self._listeners

    def __len__(self) -> int:
        with self._lock:
            return len(self._listeners)

    def __bool__(self) -> bool:
        with self._lock:
            return len(self._listeners) > 0
