"""Serialization-related exceptions.

This module defines exceptions for converting option mappings to and from text:
- SerializationError: A value cannot be represented as JSON
- DeserializationError: Text is not a JSON object
"""

from .base import MvcModelError


class SerializationError(MvcModelError):
    """An option value cannot be encoded as JSON."""

    def __init__(self, model_name: str, reason: str):
        """
        Initialize serialization error.

        Args:
            model_name: Name of the model (or mapping) being serialized
            reason: The encoder's error message
        """
        super().__init__(
            user_message=f"Cannot serialize {model_name}: {reason}",
            technical_message=f"JSON encoding of {model_name} failed: {reason}",
            recovery_hint=(
                "Only numbers, strings, booleans, None and nested lists/dicts "
                "of those can be serialized. Convert sets, tuples, bytes and "
                "dates first; remove callables and cyclic structures."
            ),
        )
        self.model_name = model_name
        self.reason = reason


class DeserializationError(MvcModelError):
    """Text could not be decoded into an option mapping."""

    def __init__(self, parse_error: str, text: str | None = None):
        """
        Initialize deserialization error.

        Args:
            parse_error: The decoder's error message
            text: The offending text (truncated in the technical message)
        """
        preview = ""
        if text is not None:
            preview = text if len(text) <= 80 else text[:77] + "..."

        super().__init__(
            user_message=f"Invalid option data: {parse_error}",
            technical_message=f"JSON decode failed for {preview!r}: {parse_error}",
            recovery_hint="The text must be a JSON object, e.g. {\"key\": \"value\"}",
        )
        self.parse_error = parse_error
        self.text = text
