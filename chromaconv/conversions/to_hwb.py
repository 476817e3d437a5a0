from __future__ import annotations
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hwb import Hwb
from ..colors.rgb import Rgb
from ..types.model_type import HUE_360, PERCENT_MAX, RGB_MAX
from ..utils.num_utils import round_half_up
from .hue import unit_rgb_hue, np_unit_rgb_hue


def unit_rgb_to_hwb(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert unit RGB to HWB without rounding.

    Returns:
        Tuple[float, float, float]: (hue [0,360), whiteness [0,1], blackness [0,1])
    """
    whiteness = min(r, g, b)
    blackness = 1 - max(r, g, b)
    return unit_rgb_hue(r, g, b), whiteness, blackness


def np_unit_rgb_to_hwb(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_to_hwb`, returns an array of shape (..., 3)."""
    r = np.asarray(r, dtype=float)
    g = np.asarray(g, dtype=float)
    b = np.asarray(b, dtype=float)

    out_shape = np.broadcast(r, g, b).shape
    r = np.broadcast_to(r, out_shape)
    g = np.broadcast_to(g, out_shape)
    b = np.broadcast_to(b, out_shape)

    whiteness = np.minimum.reduce([r, g, b])
    blackness = 1 - np.maximum.reduce([r, g, b])
    hue = np_unit_rgb_hue(r, g, b)

    return np.stack([hue, whiteness, blackness], axis=-1)


def rgb_to_hwb(rgb: Rgb | Any) -> Hwb:
    """Convert RGB to HWB. Whiteness is the smallest channel, blackness 1 minus the largest."""
    red, green, blue = Rgb.coerce(rgb)
    hue, whiteness, blackness = unit_rgb_to_hwb(red / RGB_MAX, green / RGB_MAX, blue / RGB_MAX)
    return Hwb(
        round_half_up(hue) % HUE_360,
        round_half_up(whiteness * PERCENT_MAX),
        round_half_up(blackness * PERCENT_MAX),
    )
