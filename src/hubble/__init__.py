"""Hubble: hex color codec and bounds-safe sequence access."""

__version__ = "0.1.0"

# Color codec
from .colors import COLORS, decode, decode_or_default, encode, random_color

# Models
from .models import NOTHING, Color, IndexRange, Option, Some

# Safe accessors
from .utils import element_at, random_element, slice_safe, swap_safe

__all__ = [
    "COLORS",
    "Color",
    "IndexRange",
    "NOTHING",
    "Option",
    "Some",
    "decode",
    "decode_or_default",
    "element_at",
    "encode",
    "random_color",
    "random_element",
    "slice_safe",
    "swap_safe",
]
