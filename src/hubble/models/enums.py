"""Enumerations for Hubble models."""

from enum import Enum


class Gamut(str, Enum):
    """Color space a Color's channels are expressed in."""

    SRGB = "srgb"  # Every channel in [0.0, 1.0]
    EXTENDED_SRGB = "extended_srgb"  # Wide-gamut; RGB channels may leave [0.0, 1.0]
