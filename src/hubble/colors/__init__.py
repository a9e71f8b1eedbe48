"""Color codec: hex strings to and from Color values.

```python
from hubble.colors import COLORS, decode, decode_or_default, encode

color = decode("#FF8000")
encode(color)                          # '#FF8000'
encode(color, include_alpha=True)      # '#FF8000FF'
decode_or_default("FF8000")            # COLORS.CLEAR, no '#'
decode_or_default("oops", COLORS.RED)  # COLORS.RED
```
"""

from .generate import random_color
from .hex import decode, decode_or_default, encode, encode_or_empty, normalize
from .palette import COLORS

__all__ = [
    "COLORS",
    "decode",
    "decode_or_default",
    "encode",
    "encode_or_empty",
    "normalize",
    "random_color",
]
