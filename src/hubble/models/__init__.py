"""Data models for Hubble."""

from .color import Color
from .config import DEFAULT_CONFIG_PATH, HubbleConfig
from .enums import Gamut
from .index_range import IndexRange
from .option import NOTHING, Nothing, Option, Some

__all__ = [
    # Models
    "Color",
    "HubbleConfig",
    "IndexRange",
    "DEFAULT_CONFIG_PATH",
    # Enums
    "Gamut",
    # Option
    "NOTHING",
    "Nothing",
    "Option",
    "Some",
]
