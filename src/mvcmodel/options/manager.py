"""Key/value option store with partial updates and change notifications."""

import copy
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from threading import RLock
from typing import Any

from mvcmodel.events import EventHandler, Listener

logger = logging.getLogger(__name__)

CHANGE_EVENT = "change"


@dataclass(frozen=True, slots=True)
class OptionChange:
    """Payload of the generic `change` event: one key and its new value."""

    key: str
    value: Any


def _is_same(old: Any, new: Any) -> bool:
    # True, 1 and 1.0 compare equal but are different option values, also
    # when nested inside lists and dicts
    if old is new:
        return True
    if type(old) is not type(new):
        return False
    if isinstance(old, Mapping):
        return old.keys() == new.keys() and all(_is_same(old[key], new[key]) for key in old)
    if isinstance(old, (list, tuple)):
        return len(old) == len(new) and all(_is_same(a, b) for a, b in zip(old, new))
    return old == new


def merge(current: Mapping[str, Any], updates: Mapping[str, Any]) -> dict[str, Any]:
    """
    Deep-merge `updates` into a copy of `current`.

    Nested mappings present on both sides are merged recursively; any other
    value in `updates` replaces the current one. Neither input is mutated.
    """
    merged = dict(current)
    for key, value in updates.items():
        existing = merged.get(key)
        if isinstance(existing, Mapping) and isinstance(value, Mapping):
            merged[key] = merge(existing, value)
        else:
            merged[key] = value
    return merged


class OptionsManager:
    """
    Mutable option mapping that reports every key mutation.

    Each effective change of a key emits one generic `change` event carrying
    an OptionChange. Setting a key to the value it already holds (equal, with
    matching types at every level) is not a change and emits nothing.

    Threading:
        Mutations are serialized by a lock. Listeners are called after the
        lock is released, synchronously, in the mutating thread.

    Example:
        ```python
        options = OptionsManager({"volume": 0.5})
        options.on("change", lambda change: print(change.key, change.value))
        options.patch({"volume": 0.8})   # prints: volume 0.8
        ```
    """

    def __init__(self, value: Mapping[str, Any] | None = None):
        """
        Initialize the store.

        Args:
            value: Initial mapping. It is shallow-copied; callers that need
                isolation of nested values pass a deep copy.
        """
        self._value: dict[str, Any] = dict(value) if value else {}
        self._lock = RLock()
        self._events = EventHandler(name="options")

    # =================================================================
    # Events
    # =================================================================

    def on(self, event_type: str, handler: Listener) -> Listener:
        """Subscribe to the store's events (only `change` is emitted)."""
        return self._events.on(event_type, handler)

    def remove_listener(self, event_type: str, handler: Listener) -> None:
        """Unsubscribe a handler previously passed to `on`."""
        self._events.remove_listener(event_type, handler)

    # =================================================================
    # Access
    # =================================================================

    def get(self, key: str, default: Any = None) -> Any:
        """Current value of `key`, or `default` if unset."""
        with self._lock:
            return self._value.get(key, default)

    def value(self) -> dict[str, Any]:
        """Shallow copy of the full option mapping."""
        with self._lock:
            return dict(self._value)

    def keys(self) -> list[str]:
        """Option keys in insertion order."""
        with self._lock:
            return list(self._value)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._value

    def __len__(self) -> int:
        with self._lock:
            return len(self._value)

    def __iter__(self) -> Iterator[str]:
        return iter(self.keys())

    # =================================================================
    # Mutation
    # =================================================================

    def set(self, key: str, value: Any) -> bool:
        """
        Store a value and emit `change` if it differs from the current one.

        An unchanged value (same types all the way down) leaves the store
        untouched.

        Args:
            key: Option key (new keys are accepted)
            value: New value

        Returns:
            True if the stored value changed
        """
        with self._lock:
            if key in self._value and _is_same(self._value[key], value):
                return False
            self._value[key] = value

        logger.debug(f"Option '{key}' changed")
        self._events.emit(CHANGE_EVENT, OptionChange(key, value))
        return True

    def patch(self, *mappings: Mapping[str, Any] | None) -> "OptionsManager":
        """
        Apply one or more partial mappings, key by key, in order.

        A nested mapping that meets an existing nested mapping is deep-merged
        and reported as a single change of the top-level key. Keys absent from
        the patch keep their values.

        Args:
            *mappings: Partial option mappings; None entries are skipped

        Returns:
            self, for chaining

        Raises:
            TypeError: If an argument is neither a mapping nor None
        """
        for data in mappings:
            if data is None:
                continue
            if not isinstance(data, Mapping):
                raise TypeError(f"patch() expects mappings, got {type(data).__name__}")

            for key, value in data.items():
                current = self.get(key)
                if isinstance(current, Mapping) and isinstance(value, Mapping):
                    value = merge(current, value)
                self.set(key, value)
        return self

    def copy(self) -> dict[str, Any]:
        """Deep copy of the full option mapping."""
        with self._lock:
            return copy.deepcopy(self._value)

    def __repr__(self) -> str:
        return f"OptionsManager({self.keys()!r})"
