"""Color model with normalized RGBA channels."""

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .enums import Gamut

RGB_CHANNELS = ("red", "green", "blue")


def _to_8bit(value: float) -> int:
    # Round away float noise from the /255 scaling, then truncate like int().
    return int(round(value * 255, 9))


class Color(BaseModel):
    """RGBA color with channels stored as normalized floats.

    An sRGB color keeps every channel in [0.0, 1.0]. Extended-sRGB colors
    (wide-gamut displays) may carry red, green or blue values outside that
    range; alpha is always in [0.0, 1.0].

    The model is frozen, so colors are hashable and can be used as dict keys.

    Example:
        >>> Color(red=1.0, green=0.5, blue=0.0).red_component
        255
        >>> Color.from_rgb(255, 128, 0).to_rgb_tuple()
        (255, 128, 0)
    """

    model_config = ConfigDict(frozen=True)

    red: float = Field(allow_inf_nan=False, description="Red (normalized)")
    green: float = Field(allow_inf_nan=False, description="Green (normalized)")
    blue: float = Field(allow_inf_nan=False, description="Blue (normalized)")
    alpha: float = Field(default=1.0, ge=0.0, le=1.0, description="Alpha (0.0-1.0), 1.0 is opaque")
    gamut: Gamut = Field(default=Gamut.SRGB, description="Color space of the channels")

    @model_validator(mode="after")
    def validate_gamut(self) -> "Color":
        """Ensure sRGB channels are in [0.0, 1.0]."""
        if self.gamut is Gamut.SRGB:
            for channel in RGB_CHANNELS:
                if not 0.0 <= getattr(self, channel) <= 1.0:
                    raise ValueError(f"{channel} must be between 0.0 and 1.0 for sRGB colors")
        return self

    @classmethod
    def from_rgb(cls, red: int, green: int, blue: int, transparency: float = 1.0) -> "Color":
        """Create a color from 8-bit channels.

        Args:
            red: Red (0-255)
            green: Green (0-255)
            blue: Blue (0-255)
            transparency: Alpha, clamped into [0.0, 1.0]

        Raises:
            ValueError: If a channel is outside 0-255
        """
        for value in (red, green, blue):
            if not 0 <= value <= 255:
                raise ValueError("RGB values must be between 0 and 255")

        alpha = min(max(transparency, 0.0), 1.0)
        return cls(red=red / 255.0, green=green / 255.0, blue=blue / 255.0, alpha=alpha)

    @classmethod
    def extended(cls, red: float, green: float, blue: float, alpha: float = 1.0) -> "Color":
        """Create an extended-sRGB (wide-gamut) color."""
        return cls(red=red, green=green, blue=blue, alpha=alpha, gamut=Gamut.EXTENDED_SRGB)

    @classmethod
    def clear(cls) -> "Color":
        """Create fully transparent black."""
        return cls(red=0.0, green=0.0, blue=0.0, alpha=0.0)

    @property
    def red_component(self) -> int:
        """Red as an 8-bit integer (truncated)."""
        return _to_8bit(self.red)

    @property
    def green_component(self) -> int:
        """Green as an 8-bit integer (truncated)."""
        return _to_8bit(self.green)

    @property
    def blue_component(self) -> int:
        """Blue as an 8-bit integer (truncated)."""
        return _to_8bit(self.blue)

    @property
    def alpha_component(self) -> int:
        """Alpha as an 8-bit integer (truncated)."""
        return _to_8bit(self.alpha)

    @property
    def is_in_gamut(self) -> bool:
        """True if every channel fits the plain [0.0, 1.0] RGB model."""
        return all(0.0 <= getattr(self, channel) <= 1.0 for channel in RGB_CHANNELS)

    def to_rgb_tuple(self) -> tuple[int, int, int]:
        """Convert to 8-bit RGB tuple."""
        return (self.red_component, self.green_component, self.blue_component)

    def to_rgba_tuple(self) -> tuple[int, int, int, int]:
        """Convert to 8-bit RGBA tuple."""
        return (*self.to_rgb_tuple(), self.alpha_component)
