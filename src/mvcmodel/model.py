"""Observable data model base class.

A Model holds a set of named options seeded from its class's declared
defaults, accepts partial updates, and republishes every option change as
a key-scoped event ("change:<key>") on its own public event channel.

Example:
    ```python
    class Alarm(Model):
        DEFAULT_OPTIONS = {
            "time": "23:55",
            "days": [],
            "active": False,
            "name": "Home",
        }

    alarm = Alarm({"name": "myAlarmName!"})
    alarm.on("change:name", print)
    alarm.set("name", "newName")   # prints: newName
    alarm.serialize()
    # '{"time":"23:55","days":[],"active":false,"name":"newName"}'
    ```
"""

import logging
from collections.abc import Mapping
from typing import Any, ClassVar, Self

from mvcmodel.defaults import DefaultsTemplate, resolve_defaults
from mvcmodel.events import EventHandler, EventTarget, Listener
from mvcmodel.identity import IdentityGenerator, default_identity
from mvcmodel.options import CHANGE_EVENT, OptionChange, OptionsManager
from mvcmodel.serialization import deserialize, serialize

logger = logging.getLogger(__name__)

CHANGE_PREFIX = f"{CHANGE_EVENT}:"


def change_event(key: str) -> str:
    """Name of the scoped event emitted when `key` changes."""
    return CHANGE_PREFIX + key


class Model:
    """
    Base class for observable option models.

    Subtypes declare `DEFAULT_OPTIONS` and inherit storage, patching and
    notification behavior.

    Event Surfaces:
        The option store's generic `change` event is consumed internally and
        never exposed. Subscribers use `on()`, which attaches to a separate
        output channel carrying only scoped events, one per changed key:
        `change:<key>` with the new value as payload.

    Identity:
        `id` comes from `identity` (a class attribute shared by all subtypes
        unless overridden) or from the generator passed to the constructor.
        One id is consumed per construction.

    Threading:
        Events are delivered synchronously in the thread that changed the
        value, before `set`/`patch` returns.
    """

    DEFAULT_OPTIONS: ClassVar[DefaultsTemplate] = None
    identity: ClassVar[IdentityGenerator] = default_identity

    def __init__(
        self,
        options: Mapping[str, Any] | None = None,
        *,
        identity: IdentityGenerator | None = None,
    ):
        """
        Build a model from the class defaults and optional overrides.

        Args:
            options: Partial mapping overriding the defaults
            identity: Id generator for this instance (defaults to the class's)
        """
        self._options = OptionsManager(self.defaults())
        if options:
            self._options.patch(options)

        self._event_output = EventHandler(name=type(self).__name__)
        self._options.on(CHANGE_EVENT, self._handle_change)

        self._id = (identity or self.identity).next_id()

        logger.debug(f"Created {type(self).__name__} #{self._id} with {len(self._options)} option(s)")

    @classmethod
    def defaults(cls) -> dict[str, Any]:
        """Fresh copy of this class's default options."""
        return resolve_defaults(cls.DEFAULT_OPTIONS, owner=cls.__name__)

    @property
    def id(self) -> int:
        """Unique, immutable instance id."""
        return self._id

    # =================================================================
    # Change translation
    # =================================================================

    def _handle_change(self, change: OptionChange) -> None:
        self._event_output.emit(change_event(change.key), change.value)

    # =================================================================
    # Event System
    # =================================================================

    def on(self, event_type: str, handler: Listener) -> Listener:
        """
        Subscribe to a scoped event such as "change:time".

        Args:
            event_type: Event name
            handler: Callable receiving the new value

        Returns:
            The handler
        """
        return self._event_output.on(event_type, handler)

    def remove_listener(self, event_type: str, handler: Listener) -> None:
        """Unsubscribe a handler previously passed to `on`."""
        self._event_output.remove_listener(event_type, handler)

    def pipe(self, target: EventTarget) -> EventTarget:
        """Forward this model's scoped events to another event target."""
        return self._event_output.pipe(target)

    def unpipe(self, target: EventTarget) -> EventTarget:
        """Stop forwarding events to `target`."""
        return self._event_output.unpipe(target)

    # =================================================================
    # Options
    # =================================================================

    def get(self, key: str, default: Any = None) -> Any:
        return self._options.get(key, default)

    def set(self, key: str, value: Any) -> bool:
        """
        Set one option. Emits `change:<key>` if the value changed.

        Returns:
            True if the value changed
        """
        return self._options.set(key, value)

    def patch(self, *mappings: Mapping[str, Any] | None) -> Self:
        """
        Apply partial updates; unmentioned keys keep their values.

        Emits one `change:<key>` event per key whose value changed, in the
        order the keys appear.
        """
        self._options.patch(*mappings)
        return self

    def reset(self) -> None:
        """
        Restore every default key to its default value.

        Each value is replaced outright, so nested keys added since
        construction are dropped. Top-level keys that are not defaults are
        left in place.
        """
        for key, value in self.defaults().items():
            self._options.set(key, value)

    def keys(self) -> list[str]:
        return self._options.keys()

    def __contains__(self, key: object) -> bool:
        return key in self._options

    # =================================================================
    # Snapshot / Serialization
    # =================================================================

    def snapshot(self) -> dict[str, Any]:
        """
        Current option values.

        Returns:
            A deep copy; mutating it does not affect the model
        """
        return self._options.copy()

    def serialize(self, indent: int | None = None) -> str:
        """
        JSON text of the current option values.

        Raises:
            SerializationError: If an option value cannot be represented in JSON
        """
        return serialize(self._options.value(), indent=indent, name=f"{type(self).__name__} #{self._id}")

    to_text = serialize

    @classmethod
    def deserialize(cls, text: str | bytes, **kwargs: Any) -> Self:
        """
        Build a new instance from JSON text, usually from `serialize()`.

        Decoded values replace the defaults outright (nested mappings are
        not merged), so a serialized model deserializes to the same snapshot.

        Args:
            text: JSON object text
            **kwargs: Extra constructor arguments (e.g. `identity`)

        Raises:
            DeserializationError: If the text is not a JSON object
        """
        data = deserialize(text)
        instance = cls(**kwargs)
        for key, value in data.items():
            instance._options.set(key, value)
        return instance

    def __str__(self) -> str:
        return self.serialize()

    def __repr__(self) -> str:
        # Reached while listeners are wired, before the id is assigned
        return f"{type(self).__name__}(id={getattr(self, '_id', None)}, keys={self.keys()!r})"
