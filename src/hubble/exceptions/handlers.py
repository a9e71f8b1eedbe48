"""
Helpers for turning failures into user-facing reports.

| Need | Helper |
|------|--------|
| Decode many values, report every failure at the end | `collect_errors("decode colors")` |
| Message and hint for the terminal | `format_error_for_display(error)` |
| Pydantic failure while reading a config file | `wrap_pydantic_error(error, path)` |

Example:
    ```python
    from hubble.colors import decode
    from hubble.exceptions import collect_errors

    collector = collect_errors("decode colors")
    for value in ["#FF0000", "00FF00", "#12345"]:
        with collector.try_operation(f"decode {value}"):
            decode(value)

    if collector.has_errors:
        print(collector.get_summary())
    ```
"""

import logging
from typing import Optional

from pydantic import ValidationError

from .base import HubbleError
from .config import ConfigFileInvalidError, ConfigValidationError

logger = logging.getLogger(__name__)


def _field_name(error_details: dict) -> str:
    return ".".join(str(part) for part in error_details.get("loc", ())) or "unknown"


def wrap_pydantic_error(error: Exception, file_path: str) -> HubbleError:
    """
    Map a Pydantic failure on a config file to a configuration error.

    Syntax problems become ConfigFileInvalidError; value problems become a
    ConfigValidationError naming the field, or listing every field when
    several failed.

    Args:
        error: The exception raised by Pydantic
        file_path: Config file being read or written
    """
    if not isinstance(error, ValidationError):
        return ConfigValidationError("unknown", None, str(error), file_path=file_path)

    details = error.errors()
    syntax = [d for d in details if d.get("type") == "json_invalid"]
    if syntax:
        # msg looks like "Invalid JSON: trailing comma at line 1 column 25"
        parse_error = syntax[0].get("msg", "").removeprefix("Invalid JSON:").strip()
        return ConfigFileInvalidError(file_path, parse_error or str(error))

    if len(details) == 1:
        only = details[0]
        return ConfigValidationError(
            field=_field_name(only),
            value=only.get("input"),
            error_msg=only.get("msg", "validation failed"),
            file_path=file_path,
        )

    lines = [f"  - {_field_name(d)}: {d.get('msg', 'validation failed')}" for d in details]
    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=f"{len(details)} validation errors:\n" + "\n".join(lines),
        file_path=file_path,
    )


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """Return ``(message, hint)`` for the terminal; hint is None for foreign errors."""
    if isinstance(error, HubbleError):
        return error.user_message, error.recovery_hint
    return f"{type(error).__name__}: {error}", None


def collect_errors(operation: str) -> "ErrorCollector":
    """Start collecting failures for a batch called ``operation``."""
    return ErrorCollector(operation)


class ErrorCollector:
    """
    Keeps going through a batch and remembers which items failed.

    Only HubbleError is recorded. Anything else is a bug and propagates
    out of ``try_operation`` unchanged.
    """

    def __init__(self, operation: str):
        self.operation = operation
        self.errors: list[tuple[str, HubbleError]] = []
        self.success_count = 0

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def try_operation(self, item: str) -> "_ItemScope":
        """Context manager around one item of the batch."""
        return _ItemScope(self, item)

    def get_summary(self) -> str:
        """One header line, then one line per failed item."""
        if not self.errors:
            return f"All operations completed successfully ({self.success_count} total)"

        total = self.error_count + self.success_count
        lines = [f"Failed to {self.operation}: {self.error_count} of {total} operations failed:"]
        lines.extend(f"  - {item}: {error.user_message}" for item, error in self.errors)
        return "\n".join(lines)


class _ItemScope:
    def __init__(self, collector: ErrorCollector, item: str):
        self.collector = collector
        self.item = item

    def __enter__(self) -> "_ItemScope":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        if exc_type is None:
            self.collector.success_count += 1
            return False
        if not isinstance(exc_val, HubbleError):
            return False

        logger.debug(f"{self.item} failed: {exc_val.technical_message}")
        self.collector.errors.append((self.item, exc_val))
        return True
