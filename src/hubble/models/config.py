"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from .color import Color

DEFAULT_CONFIG_PATH = Path.home() / ".hubble" / "config.json"


class HubbleConfig(BaseModel):
    """Defaults used by the command line interface."""

    fallback_color: str = Field(
        default="#00000000",
        description="Hex color substituted when a value cannot be decoded",
    )
    include_alpha: bool = Field(
        default=False, description="Encode colors as #RRGGBBAA instead of #RRGGBB"
    )
    random_seed: int | None = Field(
        default=None, description="Seed for random colors (None = non-deterministic)"
    )

    @field_validator("fallback_color")
    @classmethod
    def validate_fallback_color(cls, v: str) -> str:
        """Ensure the fallback color is a decodable hex string."""
        from hubble.colors import decode
        from hubble.exceptions import ColorCodecError

        try:
            decode(v)
        except ColorCodecError as e:
            raise ValueError(e.user_message) from e
        return v

    @property
    def fallback(self) -> Color:
        """The fallback color as a Color."""
        from hubble.colors import decode

        return decode(self.fallback_color)

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "HubbleConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses ~/.hubble/config.json.

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        from hubble.utils.persistence import PydanticPersistence

        return PydanticPersistence.load_json_or_default(path or DEFAULT_CONFIG_PATH, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file, keeping a .bak of the previous version."""
        from hubble.utils.persistence import PydanticPersistence

        PydanticPersistence.save_json(self, path or DEFAULT_CONFIG_PATH)
