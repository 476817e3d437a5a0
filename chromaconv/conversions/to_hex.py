from __future__ import annotations
from typing import Any

from ..colors.hex import Hex
from ..colors.rgb import Rgb


def rgb_to_hex(rgb: Rgb | Any) -> Hex:
    """
    Convert RGB to a ``#rrggbb`` hex color, each channel zero-padded to 2 digits.

    >>> rgb_to_hex(Rgb(255, 0, 0))
    Hex('#ff0000')
    """
    red, green, blue = Rgb.coerce(rgb)
    return Hex(f"{red:02x}{green:02x}{blue:02x}")
