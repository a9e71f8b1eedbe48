"""Generic utility modules for Hubble.

This package contains helpers that are not tied to colors:
- sequences: bounds-safe indexing, slicing and swapping
- text: string helpers with safe character access
- numbers: angle conversion and numeric casts
- dates: fixed date formats
- persistence: JSON load/save for Pydantic models
"""

from .dates import DateFormat, format_date, parse_date
from .numbers import degrees_to_radians, radians_to_degrees, to_double, to_float, to_int
from .sequences import element_at, random_element, slice_safe, swap_safe
from .text import char_at, substring

__all__ = [
    "DateFormat",
    "char_at",
    "degrees_to_radians",
    "element_at",
    "format_date",
    "parse_date",
    "radians_to_degrees",
    "random_element",
    "slice_safe",
    "substring",
    "swap_safe",
    "to_double",
    "to_float",
    "to_int",
]
