"""Explicit present/absent result type.

Safe accessors return ``Some(value)`` when a value exists and ``NOTHING``
when it does not. Unlike returning ``None``, this keeps an absent result
apart from a legitimate ``None`` element::

    >>> element_at([None], 0)
    Some(value=None)
    >>> element_at([None], 1)
    NOTHING
"""

from dataclasses import dataclass
from typing import Callable, Generic, NoReturn, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Nothing:
    """The absent case. Use the ``NOTHING`` instance."""

    @property
    def is_some(self) -> bool:
        return False

    @property
    def is_nothing(self) -> bool:
        return True

    def unwrap(self) -> NoReturn:
        raise ValueError("Called unwrap() on NOTHING")

    def unwrap_or(self, default: U) -> U:
        return default

    def unwrap_or_raise(self, error: BaseException) -> NoReturn:
        raise error

    def map(self, fn: Callable) -> "Nothing":
        return self

    def run(self, fn: Callable) -> None:
        return None

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOTHING"


@dataclass(frozen=True)
class Some(Generic[T]):
    """The present case, wrapping a value (which may itself be None)."""

    value: T

    @property
    def is_some(self) -> bool:
        return True

    @property
    def is_nothing(self) -> bool:
        return False

    def unwrap(self) -> T:
        """Return the wrapped value."""
        return self.value

    def unwrap_or(self, default: object) -> T:
        """Return the wrapped value, ignoring ``default``."""
        return self.value

    def unwrap_or_raise(self, error: BaseException) -> T:
        """Return the wrapped value; ``error`` is only raised for NOTHING."""
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Some[U]":
        """Apply ``fn`` to the wrapped value and wrap the result."""
        return Some(fn(self.value))

    def run(self, fn: Callable[[T], object]) -> None:
        """Call ``fn`` with the wrapped value for its side effect."""
        fn(self.value)

    def __bool__(self) -> bool:
        return True


NOTHING = Nothing()

Option = Union[Some[T], Nothing]
