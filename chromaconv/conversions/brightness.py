from __future__ import annotations
from typing import Any

from ..colors.rgb import Rgb

# https://en.wikipedia.org/wiki/Relative_luminance, in ten-thousandths
LUMINANCE_WEIGHTS = (2126, 7152, 722)
LUMINANCE_SCALE = 10000


def color_brightness(rgb: Rgb | Any, exact: bool = True) -> float:
    """
    Brightness of an RGB color on the 0-255 scale.

    Args:
        rgb: Color to measure
        exact: Use the relative luminance weighting. If False, the plain
            average of the three channels is returned.
    """
    red, green, blue = Rgb.coerce(rgb)
    if exact:
        w_red, w_green, w_blue = LUMINANCE_WEIGHTS
        return (w_red * red + w_green * green + w_blue * blue) / LUMINANCE_SCALE
    return (red + green + blue) / 3
