"""Hexadecimal color codec.

Supported forms (the leading '#' is required):

| Form        | Digits | Channels | Scaling          |
|-------------|--------|----------|------------------|
| #RGB        | 3      | R, G, B  | nibble / 15      |
| #RGBA       | 4      | R, G, B, A | nibble / 15    |
| #RRGGBB     | 6      | R, G, B  | byte / 255       |
| #RRGGBBAA   | 8      | R, G, B, A | byte / 255     |

Alpha defaults to 1.0 when absent. Encoding always produces the 6- or
8-digit uppercase form, so ``encode(decode(s)) == s.upper()`` for 6/8-digit
input. The 3/4-digit forms only reach 16 levels per channel.
"""

import logging
import string

from hubble.exceptions import (
    ColorCodecError,
    InvalidDigitsError,
    InvalidFormatError,
    InvalidLengthError,
    OutOfGamutError,
)
from hubble.models import Color

from .palette import COLORS

logger = logging.getLogger(__name__)

PREFIX = "#"
_HEX_DIGITS = frozenset(string.hexdigits)

# digit count -> (digits per channel, divisor, has alpha)
_LAYOUTS = {
    3: (1, 15.0, False),
    4: (1, 15.0, True),
    6: (2, 255.0, False),
    8: (2, 255.0, True),
}


def decode(hex_string: str) -> Color:
    """Decode ``#RGB``, ``#RGBA``, ``#RRGGBB`` or ``#RRGGBBAA`` into a Color.

    Raises:
        InvalidFormatError: If the string does not start with '#'
        InvalidLengthError: If the digit count is not 3, 4, 6 or 8
        InvalidDigitsError: If a character after '#' is not a hex digit

    Example:
        >>> decode("#F00F").to_rgba_tuple()
        (255, 0, 0, 255)
    """
    if not hex_string.startswith(PREFIX):
        raise InvalidFormatError(hex_string)

    digits = hex_string[len(PREFIX):]
    layout = _LAYOUTS.get(len(digits))
    if layout is None:
        raise InvalidLengthError(hex_string, len(digits))

    invalid = "".join(ch for ch in digits if ch not in _HEX_DIGITS)
    if invalid:
        raise InvalidDigitsError(hex_string, invalid)

    width, divisor, has_alpha = layout
    channels = [
        int(digits[i:i + width], 16) / divisor
        for i in range(0, len(digits), width)
    ]
    alpha = channels[3] if has_alpha else 1.0
    return Color(red=channels[0], green=channels[1], blue=channels[2], alpha=alpha)


def decode_or_default(hex_string: str, fallback: Color = COLORS.CLEAR) -> Color:
    """Decode a hex string, returning ``fallback`` instead of raising."""
    if not isinstance(hex_string, str):
        logger.debug(f"Using fallback color for non-string value {hex_string!r}")
        return fallback
    try:
        return decode(hex_string)
    except ColorCodecError as e:
        logger.debug(f"Using fallback color: {e.technical_message}")
        return fallback


def _channel_to_byte(value: float) -> int:
    return int(value * 255 + 0.5)


def encode(color: Color, include_alpha: bool = False) -> str:
    """Encode a color as ``#RRGGBB`` (or ``#RRGGBBAA`` with ``include_alpha``).

    Channels are scaled by 255 and rounded to the nearest integer.

    Raises:
        OutOfGamutError: If a channel lies outside [0.0, 1.0]
    """
    channels = {"red": color.red, "green": color.green, "blue": color.blue}
    if include_alpha:
        channels["alpha"] = color.alpha

    for name, value in channels.items():
        if not 0.0 <= value <= 1.0:
            raise OutOfGamutError(color, name, value)

    return PREFIX + "".join(f"{_channel_to_byte(value):02X}" for value in channels.values())


def encode_or_empty(color: Color, include_alpha: bool = False) -> str:
    """Encode a color, returning an empty string if it is out of gamut."""
    try:
        return encode(color, include_alpha)
    except OutOfGamutError as e:
        logger.debug(f"Cannot encode color: {e.technical_message}")
        return ""


def normalize(hex_string: str, include_alpha: bool = False) -> str:
    """Rewrite any supported hex form as ``#RRGGBB`` / ``#RRGGBBAA``.

    Raises:
        ColorCodecError: If ``hex_string`` cannot be decoded
    """
    return encode(decode(hex_string), include_alpha)
