"""Sequence access exceptions."""

from .base import HubbleError


class EmptySequenceError(HubbleError):
    """An operation that needs at least one element got an empty sequence."""

    def __init__(self, operation: str):
        """
        Initialize empty sequence error.

        Args:
            operation: Name of the operation that required an element
        """
        super().__init__(
            user_message=f"Cannot {operation} from an empty sequence",
            technical_message=f"{operation} called with an empty sequence",
            recoverable=True,
            recovery_hint="Check that the sequence has at least one element first",
        )
        self.operation = operation
