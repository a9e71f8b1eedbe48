"""Random color generation."""

import random

from hubble.models import Color

# randrange excludes its stop value, so channels top out at 254.
CHANNEL_STOP = 255


def random_color(rng: random.Random | None = None) -> Color:
    """Create an opaque color with each RGB channel drawn from 0-254.

    Args:
        rng: Random generator to draw from (defaults to the module-level one)
    """
    rng = rng or random
    red, green, blue = (rng.randrange(CHANNEL_STOP) for _ in range(3))
    return Color.from_rgb(red, green, blue)
