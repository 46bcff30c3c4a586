"""Named publish/subscribe event handler."""

import logging
from collections.abc import Callable
from threading import Lock
from typing import Any, Protocol, runtime_checkable

from mvcmodel.events.listeners import ListenerList

logger = logging.getLogger(__name__)

Listener = Callable[[Any], None]


@runtime_checkable
class EventTarget(Protocol):
    """Anything that accepts emitted events (used as a pipe destination)."""

    def emit(self, event_type: str, payload: Any = None) -> None:
        """Receive an event forwarded by a piped EventHandler."""
        ...


class EventHandler:
    """
    Synchronous publish/subscribe hub keyed by event name.

    Listeners receive the payload as their only argument. Emission happens
    in the caller's thread and returns only after every listener (and every
    piped target) has run.

    Example:
        ```python
        events = EventHandler()
        events.on("change:name", lambda value: print(value))
        events.emit("change:name", "Home")
        ```
    """

    def __init__(self, name: str = "events"):
        """
        Initialize the event handler.

        Args:
            name: Name used in log messages
        """
        self._name = name
        self._lock = Lock()
        self._listeners: dict[str, ListenerList[Listener]] = {}
        self._downstream: list[EventTarget] = []

    def on(self, event_type: str, handler: Listener) -> Listener:
        """
        Subscribe a handler to an event.

        Args:
            event_type: Event name (e.g. "change:time")
            handler: Callable receiving the event payload

        Returns:
            The handler (pass it to `remove_listener` to unsubscribe)
        """
        with self._lock:
            listeners = self._listeners.get(event_type)
            if listeners is None:
                listeners = ListenerList[Listener](name=f"{self._name}/{event_type}")
                self._listeners[event_type] = listeners
        listeners.register(handler)
        return handler

    add_listener = on

    def remove_listener(self, event_type: str, handler: Listener) -> None:
        """
        Unsubscribe a handler from an event.

        Args:
            event_type: Event name the handler was subscribed to
            handler: Previously subscribed callable
        """
        with self._lock:
            listeners = self._listeners.get(event_type)
        if listeners is None:
            logger.warning(f"No {self._name} listeners for '{event_type}' to remove {handler} from")
            return
        listeners.unregister(handler)

    def emit(self, event_type: str, payload: Any = None) -> None:
        """
        Deliver an event to its listeners, then to every piped target.

        Args:
            event_type: Event name
            payload: Value passed to each listener
        """
        with self._lock:
            listeners = self._listeners.get(event_type)
            downstream = list(self._downstream)

        logger.debug(f"{self._name} emit '{event_type}'")

        if listeners is not None:
            listeners.notify(payload)

        for target in downstream:
            target.emit(event_type, payload)

    def pipe(self, target: EventTarget) -> EventTarget:
        """
        Forward every event emitted here to another target.

        Args:
            target: Object exposing `emit(event_type, payload)`

        Returns:
            The target, allowing chained pipes
        """
        with self._lock:
            if target not in self._downstream:
                self._downstream.append(target)
                logger.debug(f"{self._name} piped to {target}")
        return target

    def unpipe(self, target: EventTarget) -> EventTarget:
        """
        Stop forwarding events to a target.

        Args:
            target: Previously piped target

        Returns:
            The target
        """
        with self._lock:
            if target in self._downstream:
                self._downstream.remove(target)
                logger.debug(f"{self._name} unpiped from {target}")
            else:
                logger.warning(f"{self._name} was not piped to {target}")
        return target

    def listener_count(self, event_type: str) -> int:
        """Number of handlers subscribed to an event."""
        with self._lock:
            listeners = self._listeners.get(event_type)
        return len(listeners) if listeners is not None else 0

    def __repr__(self) -> str:
        return f"EventHandler(name={self._name!r})"
