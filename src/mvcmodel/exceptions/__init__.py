"""
Custom exception hierarchy for mvcmodel.

## Exception Hierarchy

```
MvcModelError (base)
├── SerializationError
└── DeserializationError
```

All custom exceptions inherit from `MvcModelError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recovery_hint`: Optional suggestion for how to fix the issue

### Example: Unserializable Option

```python
from mvcmodel.exceptions import SerializationError

alarm.set("callback", print)
try:
    alarm.serialize()
except SerializationError as e:
    logger.error(e.technical_message)
```
"""

from .base import MvcModelError
from .handlers import wrap_deserialization_error, wrap_serialization_error
from .serialization import DeserializationError, SerializationError

__all__ = [
    # Base
    "MvcModelError",
    # Serialization
    "DeserializationError",
    "SerializationError",
    # Handlers
    "wrap_deserialization_error",
    "wrap_serialization_error",
]
