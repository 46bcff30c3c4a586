"""Resolution of a model subtype's declared default options.

A subtype declares its defaults once, as a class attribute, in one of
these forms:

- a plain mapping: ``DEFAULT_OPTIONS = {"time": "23:55", "active": False}``
- a pydantic model class whose field defaults are the options
- a pydantic model instance
- ``None`` (no defaults)

The declaration is a template: it is never handed to an instance. Each
instance receives a deep copy, so nested values (lists, dicts) are never
shared between instances or with the template.
"""

import copy
import logging
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DefaultsTemplate = Mapping[str, Any] | BaseModel | type[BaseModel] | None


def resolve_defaults(template: DefaultsTemplate, owner: str = "model") -> dict[str, Any]:
    """
    Build a fresh, independent option mapping from a defaults template.

    Args:
        template: The declared defaults
        owner: Name of the declaring class, for log messages

    Returns:
        A new dict, deep-copied from the template. Unusable templates
        resolve to an empty dict.
    """
    if template is None:
        return {}

    if isinstance(template, type) and issubclass(template, BaseModel):
        # Required fields without defaults make this raise; treat like any
        # other malformed template
        try:
            template = template()
        except Exception as e:
            logger.warning(f"{owner}.DEFAULT_OPTIONS model cannot be built without arguments: {e}")
            return {}

    if isinstance(template, BaseModel):
        return template.model_dump()

    if isinstance(template, Mapping):
        return copy.deepcopy(dict(template))

    logger.warning(
        f"{owner}.DEFAULT_OPTIONS must be a mapping or pydantic model, "
        f"got {type(template).__name__}; using no defaults"
    )
    return {}
