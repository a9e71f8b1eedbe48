"""Color codec exceptions.

This module defines the failure kinds of hex decoding and encoding:
- ColorCodecError: Base class, carries the offending value
- InvalidFormatError: Hex string lacks the leading '#'
- InvalidLengthError: Digit count is not 3, 4, 6 or 8
- InvalidDigitsError: Non-hexadecimal characters after the '#'
- OutOfGamutError: A channel lies outside [0, 1] when encoding
"""

from typing import Any

from .base import HubbleError


class ColorCodecError(HubbleError):
    """A color could not be decoded from or encoded to a hex string."""

    def __init__(self, value: Any, user_message: str, technical_message: str | None = None,
                 recovery_hint: str | None = None):
        super().__init__(
            user_message=user_message,
            technical_message=technical_message,
            recoverable=True,
            recovery_hint=recovery_hint,
        )
        self.value = value


class InvalidFormatError(ColorCodecError):
    """Hex string does not start with '#'."""

    def __init__(self, value: str):
        super().__init__(
            value,
            user_message=f"Invalid RGB string, missing '#' as prefix in {value!r}",
            recovery_hint=f"Prefix the value with '#', e.g. '#{value}'",
        )


class InvalidLengthError(ColorCodecError):
    """Number of hex digits after '#' is not 3, 4, 6 or 8."""

    def __init__(self, value: str, digit_count: int):
        super().__init__(
            value,
            user_message=(
                f"Invalid RGB string from {value!r}, number of characters after '#' "
                "should be either 3, 4, 6 or 8"
            ),
            technical_message=f"Hex string {value!r} has {digit_count} digits",
            recovery_hint="Use one of the forms #RGB, #RGBA, #RRGGBB or #RRGGBBAA",
        )
        self.digit_count = digit_count


class InvalidDigitsError(ColorCodecError):
    """Hex string contains characters that are not hexadecimal digits."""

    def __init__(self, value: str, invalid: str):
        super().__init__(
            value,
            user_message=f"Unable to scan hex value {value!r}",
            technical_message=f"Hex string {value!r} contains non-hex characters {invalid!r}",
            recovery_hint="Only the characters 0-9, a-f and A-F are allowed after '#'",
        )
        self.invalid = invalid


class OutOfGamutError(ColorCodecError):
    """Color has a channel that the 8-bit RGB hex form cannot represent."""

    def __init__(self, value: Any, channel: str, channel_value: float):
        super().__init__(
            value,
            user_message="Unable to output hex string for wide display color",
            technical_message=(
                f"Channel {channel}={channel_value!r} of {value!r} is outside [0.0, 1.0]"
            ),
            recovery_hint="Convert the color to the sRGB gamut before encoding it",
        )
        self.channel = channel
        self.channel_value = channel_value
