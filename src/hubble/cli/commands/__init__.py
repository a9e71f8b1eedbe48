"""CLI commands."""

from .color import color_group
from .config import config_group

__all__ = ["color_group", "config_group"]
