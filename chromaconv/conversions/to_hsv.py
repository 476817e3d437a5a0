from __future__ import annotations
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hsv import Hsv
from ..colors.rgb import Rgb
from ..types.model_type import HUE_360, PERCENT_MAX, RGB_MAX
from ..utils.num_utils import round_half_up
from .hue import unit_rgb_hue, np_unit_rgb_hue


def unit_rgb_to_hsv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HSV without rounding.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], value [0,1])
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)

    # Black has no saturation
    saturation = 1 - min_c / max_c if max_c != 0 else 0.0

    return unit_rgb_hue(r, g, b), saturation, max_c


def np_unit_rgb_to_hsv(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_hsv`, returns an array of shape (..., 3)."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    max_c = np.maximum.reduce([r, g, b])
    min_c = np.minimum.reduce([r, g, b])

    lit = max_c != 0
    saturation = np.where(lit, 1 - min_c / np.where(lit, max_c, 1.0), 0.0)
    hue = np_unit_rgb_hue(r, g, b)

    return np.stack([hue, saturation, max_c], axis=-1)


def rgb_to_hsv(rgb: Rgb | Any) -> Hsv:
    """Convert RGB to HSV."""
    red, green, blue = Rgb.coerce(rgb)
    hue, saturation, value = unit_rgb_to_hsv(red / RGB_MAX, green / RGB_MAX, blue / RGB_MAX)
    return Hsv(
        round_half_up(hue) % HUE_360,
        round_half_up(saturation * PERCENT_MAX),
        round_half_up(value * PERCENT_MAX),
    )
