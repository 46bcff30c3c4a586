"""JSON text encoding of option mappings.

Encoding and decoding go through a pydantic TypeAdapter for
``dict[str, Any]``. Keys keep their insertion order, so the same mapping
always produces the same text. Non-finite floats are written as the JSON
constants ``NaN``/``Infinity`` instead of being replaced by ``null``.
"""

import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ConfigDict, TypeAdapter, ValidationError

from mvcmodel.exceptions import wrap_deserialization_error, wrap_serialization_error

logger = logging.getLogger(__name__)

_OPTIONS_ADAPTER = TypeAdapter(
    dict[str, Any],
    config=ConfigDict(ser_json_inf_nan="constants"),
)


_JSON_SCALARS = (str, bool, int, float)


def ensure_json_value(value: Any, path: str = "$", _seen: set[int] | None = None) -> None:
    """
    Check that `value` is made only of JSON types.

    Accepted: None, str, bool, int, float, lists, and dicts with str keys.
    Anything else (sets, tuples, bytes, datetimes, callables, custom objects)
    would be converted or dropped by the encoder, so it is rejected.

    Raises:
        TypeError: If a value or key has no JSON form
        ValueError: If a list or dict contains itself
    """
    if value is None or isinstance(value, _JSON_SCALARS):
        return

    if not isinstance(value, (dict, list)):
        raise TypeError(f"{path}: {type(value).__name__} has no JSON representation")

    seen = _seen if _seen is not None else set()
    if id(value) in seen:
        raise ValueError(f"{path}: Circular reference detected")
    seen.add(id(value))

    if isinstance(value, dict):
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"{path}: key {key!r} is not a string")
            ensure_json_value(item, f"{path}.{key}", seen)
    else:
        for index, item in enumerate(value):
            ensure_json_value(item, f"{path}[{index}]", seen)

    # Shared, non-cyclic references are fine
    seen.discard(id(value))


def serialize(options: Mapping[str, Any], indent: int | None = None, name: str = "options") -> str:
    """
    Encode an option mapping as JSON text.

    Args:
        options: Mapping of option keys to JSON-representable values
        indent: Pretty-print indentation (compact when None)
        name: Name of the owner, used in error messages

    Returns:
        The JSON text

    Raises:
        SerializationError: If a value cannot be represented in JSON
            (sets, tuples, bytes, datetimes, callables, cyclic structures,
            arbitrary objects)
    """
    try:
        ensure_json_value(dict(options))
        encoded = _OPTIONS_ADAPTER.dump_json(dict(options), indent=indent)
    except (ValueError, TypeError, RecursionError) as e:
        raise wrap_serialization_error(e, name) from e
    return encoded.decode("utf-8")


def deserialize(text: str | bytes) -> dict[str, Any]:
    """
    Decode JSON text produced by `serialize` back into an option mapping.

    Args:
        text: JSON text whose top-level value is an object

    Returns:
        The decoded mapping

    Raises:
        DeserializationError: If the text is not valid JSON or not an object
    """
    try:
        return _OPTIONS_ADAPTER.validate_json(text)
    except ValidationError as e:
        shown = text.decode("utf-8", errors="replace") if isinstance(text, bytes) else text
        raise wrap_deserialization_error(e, shown) from e
