"""
Custom exception hierarchy for Hubble.

## Exception Hierarchy

```
HubbleError (base)
├── ColorCodecError
│   ├── InvalidFormatError
│   ├── InvalidLengthError
│   ├── InvalidDigitsError
│   └── OutOfGamutError
├── EmptySequenceError
└── ConfigurationError
    ├── ConfigFileInvalidError
    └── ConfigValidationError
```

All custom exceptions inherit from `HubbleError`, which provides
`user_message`, `technical_message`, `recoverable` and `recovery_hint`.
Calling code can branch on the concrete class:

```python
from hubble.colors import decode
from hubble.exceptions import InvalidFormatError, InvalidLengthError

try:
    color = decode(value)
except InvalidFormatError:
    color = decode("#" + value)
except InvalidLengthError as e:
    print(e.get_full_message())
```

Out-of-range indexing is not an error: safe accessors return `NOTHING`.
"""

from .base import HubbleError
from .color import (
    ColorCodecError,
    InvalidDigitsError,
    InvalidFormatError,
    InvalidLengthError,
    OutOfGamutError,
)
from .config import ConfigFileInvalidError, ConfigurationError, ConfigValidationError
from .handlers import (
    ErrorCollector,
    collect_errors,
    format_error_for_display,
    wrap_pydantic_error,
)
from .sequence import EmptySequenceError

__all__ = [
    # Base
    "HubbleError",
    # Color codec
    "ColorCodecError",
    "InvalidFormatError",
    "InvalidLengthError",
    "InvalidDigitsError",
    "OutOfGamutError",
    # Sequences
    "EmptySequenceError",
    # Config
    "ConfigurationError",
    "ConfigFileInvalidError",
    "ConfigValidationError",
    # Handlers
    "ErrorCollector",
    "collect_errors",
    "format_error_for_display",
    "wrap_pydantic_error",
]
