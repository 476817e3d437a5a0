from __future__ import annotations
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsl import Hsl
from ..colors.rgb import Rgb
from ..types.model_type import HUE_360, PERCENT_MAX, RGB_MAX
from ..utils.num_utils import round_half_up
from .hue import unit_rgb_hue, np_unit_rgb_hue


def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSL without rounding.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    # Achromatic: hue and saturation are both 0
    if max_c == min_c:
        return 0.0, 0.0, lightness

    if lightness > 0.5:
        saturation = delta / (2 - max_c - min_c)
    else:
        saturation = delta / (max_c + min_c)

    return unit_rgb_hue(r, g, b), saturation, lightness


def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to HSL without rounding.

    Args:
        r, g, b: array-like or scalar, [0,1]

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])
    delta = max_c - min_c

    lightness = (max_c + min_c) / 2

    chromatic = max_c != min_c
    denominator = np.where(lightness > 0.5, 2 - max_c - min_c, max_c + min_c)
    denominator = np.where(chromatic, denominator, 1.0)
    saturation = np.where(chromatic, delta / denominator, 0.0)

    hue = np_unit_rgb_hue(r, g, b)

    return np.stack([hue, saturation, lightness], axis=-1)


def rgb_to_hsl(rgb: Rgb | Any) -> Hsl:
    """
    Convert RGB to HSL, rounding each output once at the end.

    >>> rgb_to_hsl(Rgb(64, 98, 115))
    Hsl(hue=200, saturation=28, lightness=35)
    """
    red, green, blue = Rgb.coerce(rgb)
    hue, saturation, lightness = unit_rgb_to_hsl(red / RGB_MAX, green / RGB_MAX, blue / RGB_MAX)
    return Hsl(
        round_half_up(hue) % HUE_360,
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(lightness * PERCENT_MAX),
    )
