"""mvcmodel: observable option models with key-scoped change events."""

__version__ = "0.1.0"

from .events import EventHandler
from .exceptions import DeserializationError, MvcModelError, SerializationError
from .identity import CounterIdentity, IdentityGenerator, default_identity
from .model import CHANGE_PREFIX, Model, change_event
from .options import OptionChange, OptionsManager
from .serialization import deserialize, serialize

__all__ = [
    # Model
    "Model",
    "CHANGE_PREFIX",
    "change_event",
    # Collaborators
    "EventHandler",
    "OptionChange",
    "OptionsManager",
    # Identity
    "CounterIdentity",
    "IdentityGenerator",
    "default_identity",
    # Serialization
    "serialize",
    "deserialize",
    # Errors
    "MvcModelError",
    "SerializationError",
    "DeserializationError",
]
