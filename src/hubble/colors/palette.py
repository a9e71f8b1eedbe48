"""Named color constants."""

from hubble.models import Color


class COLORS:
    """Standard color constants.

    All colors are sRGB; channels are built from 8-bit values so that
    encoding them yields the hex string given in each docstring.
    """

    # ============================================================================
    # SPECIAL
    # ============================================================================

    CLEAR: Color = Color.clear()
    """Fully transparent black - #00000000, default decode fallback"""

    BLACK: Color = Color.from_rgb(0, 0, 0)
    """#000000"""

    WHITE: Color = Color.from_rgb(255, 255, 255)
    """#FFFFFF"""

    # ============================================================================
    # PRIMARY & SECONDARY
    # ============================================================================

    RED: Color = Color.from_rgb(255, 0, 0)
    """#FF0000"""

    GREEN: Color = Color.from_rgb(0, 255, 0)
    """#00FF00"""

    BLUE: Color = Color.from_rgb(0, 0, 255)
    """#0000FF"""

    YELLOW: Color = Color.from_rgb(255, 255, 0)
    """#FFFF00"""

    CYAN: Color = Color.from_rgb(0, 255, 255)
    """#00FFFF"""

    MAGENTA: Color = Color.from_rgb(255, 0, 255)
    """#FF00FF"""

    ORANGE: Color = Color.from_rgb(255, 128, 0)
    """#FF8000"""

    PURPLE: Color = Color.from_rgb(128, 0, 255)
    """#8000FF"""

    # ============================================================================
    # GREYS
    # ============================================================================

    GREY_DARK: Color = Color.from_rgb(64, 64, 64)
    """#404040"""

    GREY: Color = Color.from_rgb(128, 128, 128)
    """#808080"""

    GREY_LIGHT: Color = Color.from_rgb(192, 192, 192)
    """#C0C0C0"""
