"""Bounds-safe access and small helpers for ordered sequences.

Out-of-range reads never raise; they return ``NOTHING``::

    >>> element_at([1, 2, 3, 4, 5], 2)
    Some(value=3)
    >>> element_at([1, 2, 3, 4, 5], 10)
    NOTHING
    >>> slice_safe("Hello World!", range(6, 11))
    Some(value='World')
"""

import logging
import random
from collections.abc import Callable, Iterable, MutableSequence, Sequence
from typing import TypeVar

from hubble.exceptions import EmptySequenceError
from hubble.models import NOTHING, IndexRange, Option, Some

logger = logging.getLogger(__name__)

T = TypeVar("T")
S = TypeVar("S", bound=Sequence)


def _in_bounds(sequence: Sequence, index: int) -> bool:
    return 0 <= index < len(sequence)


def element_at(sequence: Sequence[T], index: int) -> Option[T]:
    """Element at ``index`` if ``0 <= index < len(sequence)``, else NOTHING.

    Negative indices are out of range; they do not count from the end.
    """
    if not _in_bounds(sequence, index):
        return NOTHING
    return Some(sequence[index])


def slice_safe(sequence: S, index_range: IndexRange | range) -> Option[S]:
    """Sub-sequence covered by ``index_range``, or NOTHING if it runs past the end.

    The lower bound is clamped to 0 while the range length is kept, so
    ``range(-2, 3)`` selects the first five elements. A builtin ``range``
    is half-open; use ``IndexRange.closed`` to include the upper bound.

    Raises:
        ValueError: If a builtin range has a step other than 1 or is reversed
    """
    bounds = IndexRange.coerce(index_range)
    lower = max(0, bounds.lower)
    if lower > len(sequence):
        return NOTHING

    upper = lower + bounds.length
    if upper > len(sequence):
        return NOTHING
    return Some(sequence[lower:upper])


def swap_safe(sequence: MutableSequence, index_a: int, index_b: int) -> None:
    """Swap two elements in place; no-op if indices match or are out of bounds."""
    if index_a == index_b:
        return
    if not (_in_bounds(sequence, index_a) and _in_bounds(sequence, index_b)):
        logger.debug(f"Ignoring swap of {index_a} and {index_b} in sequence of length {len(sequence)}")
        return
    sequence[index_a], sequence[index_b] = sequence[index_b], sequence[index_a]


def random_element(sequence: Sequence[T], rng: random.Random | None = None) -> T:
    """Element chosen uniformly at random.

    Raises:
        EmptySequenceError: If ``sequence`` is empty
    """
    if not sequence:
        raise EmptySequenceError("pick a random element")
    rng = rng or random
    return sequence[rng.randrange(len(sequence))]


def first_index(sequence: Sequence[T], condition: Callable[[T], bool]) -> Option[int]:
    """Index of the first element matching ``condition``."""
    for index, value in enumerate(sequence):
        if condition(value):
            return Some(index)
    return NOTHING


def last_index(sequence: Sequence[T], condition: Callable[[T], bool]) -> Option[int]:
    """Index of the last element matching ``condition``."""
    for index in range(len(sequence) - 1, -1, -1):
        if condition(sequence[index]):
            return Some(index)
    return NOTHING


def count_where(sequence: Iterable[T], condition: Callable[[T], bool]) -> int:
    return sum(1 for value in sequence if condition(value))


def all_match(sequence: Iterable[T], condition: Callable[[T], bool]) -> bool:
    return all(condition(value) for value in sequence)


def none_match(sequence: Iterable[T], condition: Callable[[T], bool]) -> bool:
    return not any(condition(value) for value in sequence)


def contains_all(sequence: Sequence[T], items: Iterable[T]) -> bool:
    """True if every item is in ``sequence``. An empty ``items`` is always contained."""
    return all(item in sequence for item in items)


def remove_all(sequence: MutableSequence[T], items: Iterable[T]) -> None:
    """Remove every occurrence of each of ``items`` in place."""
    items = list(items)
    if not items:
        return
    sequence[:] = [value for value in sequence if value not in items]


def duplicates_removed(sequence: Iterable[T]) -> list[T]:
    """Copy without duplicates, keeping the first occurrence of each value.

    Uses equality only, so unhashable elements are supported.
    """
    unique: list[T] = []
    for value in sequence:
        if value not in unique:
            unique.append(value)
    return unique


def remove_duplicates(sequence: MutableSequence[T]) -> None:
    """Remove duplicates in place, keeping the first occurrence of each value."""
    sequence[:] = duplicates_removed(sequence)


def total(sequence: Iterable[float]) -> float:
    """Sum of all elements; 0 for an empty sequence."""
    return sum(sequence)


def average(sequence: Sequence[float]) -> float:
    """Arithmetic mean; 0.0 for an empty sequence."""
    if not sequence:
        return 0.0
    return sum(sequence) / len(sequence)
