"""Instance identity generation.

Every Model receives an integer id from an IdentityGenerator when it is
constructed. By default all models share one process-wide CounterIdentity,
so ids are unique and strictly increasing across every subtype for the
lifetime of the process. Ids are not persisted and restart from zero with
the process.
"""

import logging
from threading import Lock
from typing import Protocol, runtime_checkable

logger = logging.getLogger(__name__)


@runtime_checkable
class IdentityGenerator(Protocol):
    """Source of instance ids."""

    def next_id(self) -> int:
        """Return an id never returned before by this generator."""
        ...


class CounterIdentity:
    """
    Thread-safe monotonically increasing integer counter.

    Example:
        ```python
        ids = CounterIdentity()
        ids.next_id()  # 0
        ids.next_id()  # 1
        ```
    """

    def __init__(self, start: int = 0):
        self._next = start
        self._lock = Lock()

    def next_id(self) -> int:
        """Return the current counter value and advance it by one."""
        with self._lock:
            value = self._next
            self._next += 1
        return value

    def peek(self) -> int:
        """The id the next call to `next_id` will return."""
        with self._lock:
            return self._next

    def reset(self, start: int = 0) -> None:
        """
        Restart the counter.

        Only meant for tests: ids handed out before the reset may be
        handed out again.
        """
        with self._lock:
            self._next = start
        logger.debug(f"Identity counter reset to {start}")

    def __repr__(self) -> str:
        return f"CounterIdentity(next={self.peek()})"


# Shared by every Model unless a subtype or caller injects another generator
default_identity = CounterIdentity()
