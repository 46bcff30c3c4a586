"""
Helpers converting low-level encoder/decoder errors into mvcmodel exceptions.

## Example

```python
from mvcmodel.exceptions import wrap_deserialization_error

try:
    data = adapter.validate_json(text)
except ValidationError as e:
    raise wrap_deserialization_error(e, text) from e
```

The wrappers only build the exception; callers raise it with `from e` so the
original error stays attached for debugging.
"""

import logging

from .serialization import DeserializationError, SerializationError

logger = logging.getLogger(__name__)


def wrap_serialization_error(error: Exception, model_name: str) -> SerializationError:
    """
    Convert an encoder failure into a SerializationError.

    Pydantic reports unknown types as "Unable to serialize unknown type: ..."
    and cycles as "Circular reference detected"; both are kept verbatim.

    Args:
        error: The exception raised by the JSON encoder
        model_name: Name of the model being serialized

    Returns:
        A SerializationError describing the failure
    """
    if isinstance(error, RecursionError):
        reason = "Circular reference detected"
    else:
        reason = str(error).strip() or type(error).__name__

    wrapped = SerializationError(model_name, reason)
    logger.debug(wrapped.technical_message)
    return wrapped


def wrap_deserialization_error(error: Exception, text: str | None = None) -> DeserializationError:
    """
    Convert a pydantic decoding failure into a DeserializationError.

    Args:
        error: The pydantic ValidationError (or other decoder error)
        text: The text that failed to decode

    Returns:
        A DeserializationError with the most specific message available
    """
    from pydantic import ValidationError

    parse_error = str(error)

    if isinstance(error, ValidationError):
        errors = error.errors()
        if errors:
            first_error = errors[0]
            if first_error.get("type") == "json_invalid":
                # Format: "Invalid JSON: <actual error>"
                parse_error = first_error.get("msg", parse_error)
            elif first_error.get("type") == "dict_type":
                parse_error = "top-level JSON value must be an object"
            else:
                loc = ".".join(str(part) for part in first_error.get("loc", ()))
                msg = first_error.get("msg", "validation failed")
                parse_error = f"{loc}: {msg}" if loc else msg

    wrapped = DeserializationError(parse_error, text)
    logger.debug(wrapped.technical_message)
    return wrapped
