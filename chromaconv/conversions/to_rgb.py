from __future__ import annotations
import math
from typing import Any

import numpy as np
from numpy import ndarray as NDArray

from ..colors.hex import Hex
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hwb import Hwb
from ..colors.rgb import Rgb
from ..types.model_type import PERCENT_MAX, RGB_MAX
from ..utils.num_utils import round_half_up

## Chroma / hue-segment reconstruction

def _chroma_to_unit_rgb(h: float, chroma: float, m: float) -> tuple[float, float, float]:
    segment = h / 60
    x = chroma * (1 - abs(segment % 2 - 1))

    hue_section = int(math.floor(segment))

    if hue_section == 0:
        r, g, b = chroma, x, 0.0
    elif hue_section == 1:
        r, g, b = x, chroma, 0.0
    elif hue_section == 2:
        r, g, b = 0.0, chroma, x
    elif hue_section == 3:
        r, g, b = 0.0, x, chroma
    elif hue_section == 4:
        r, g, b = x, 0.0, chroma
    else:
        r, g, b = chroma, 0.0, x

    return r + m, g + m, b + m


def _np_chroma_to_unit_rgb(h: NDArray, chroma: NDArray, m: NDArray) -> NDArray:
    segment = h / 60
    x = chroma * (1 - np.abs(np.mod(segment, 2) - 1))
    zero = np.zeros_like(chroma)

    hue_section = np.floor(segment).astype(int)
    sections = [hue_section == i for i in range(5)]

    r = np.select(sections, [chroma, x, zero, zero, x], default=chroma)
    g = np.select(sections, [x, chroma, chroma, x, zero], default=zero)
    b = np.select(sections, [zero, zero, x, chroma, chroma], default=x)

    return np.stack([r + m, g + m, b + m], axis=-1)


def _broadcast(*channels: Any) -> list[NDArray]:
    arrays = [np.asarray(c, dtype=float) for c in channels]
    out_shape = np.broadcast(*arrays).shape
    return [np.broadcast_to(a, out_shape) for a in arrays]


def _scale_unit_rgb(r: float, g: float, b: float) -> Rgb:
    return Rgb(
        round_half_up(r * RGB_MAX),
        round_half_up(g * RGB_MAX),
        round_half_up(b * RGB_MAX),
    )

## HEX to RGB

def hex_to_rgb(hexadecimal: Hex | str) -> Rgb:
    """
    Split the 6 hex digits into 3 base-16 pairs.

    >>> hex_to_rgb("#406273")
    Rgb(red=64, green=98, blue=115)
    """
    digits = Hex.coerce(hexadecimal).digits
    return Rgb(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))

## HSL to RGB

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to unit RGB without rounding.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b) in [0, 1]
    """
    chroma = (1 - abs(2 * l - 1)) * s
    return _chroma_to_unit_rgb(h, chroma, l - chroma / 2)


def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to unit RGB.

    Returns:
        rgb: array of shape (..., 3): (r, g, b) in [0, 1]
    """
    h, s, l = _broadcast(h, s, l)
    chroma = (1 - np.abs(2 * l - 1)) * s
    return _np_chroma_to_unit_rgb(h, chroma, l - chroma / 2)


def hsl_to_rgb(hsl: Hsl | Any) -> Rgb:
    """Convert HSL to RGB."""
    hue, saturation, lightness = Hsl.coerce(hsl)
    return _scale_unit_rgb(*hsl_to_unit_rgb(hue, saturation / PERCENT_MAX, lightness / PERCENT_MAX))

## HSV to RGB

def hsv_to_unit_rgb(h: float, s: float, v: float) -> tuple[float, float, float]:
    """
    Convert HSV to unit RGB without rounding.

    Args:
        h: Hue in degrees [0, 360)
        s: Saturation in [0, 1]
        v: Value in [0, 1]
    """
    chroma = v * s
    return _chroma_to_unit_rgb(h, chroma, v - chroma)


def np_hsv_to_unit_rgb(h: NDArray, s: NDArray, v: NDArray) -> NDArray:
    """Vectorized :func:`hsv_to_unit_rgb`, returns an array of shape (..., 3)."""
    h, s, v = _broadcast(h, s, v)
    chroma = v * s
    return _np_chroma_to_unit_rgb(h, chroma, v - chroma)


def hsv_to_rgb(hsv: Hsv | Any) -> Rgb:
    """Convert HSV to RGB."""
    hue, saturation, value = Hsv.coerce(hsv)
    return _scale_unit_rgb(*hsv_to_unit_rgb(hue, saturation / PERCENT_MAX, value / PERCENT_MAX))

## HWB to RGB

def hwb_to_unit_rgb(h: float, w: float, b: float) -> tuple[float, float, float]:
    """
    Convert HWB to unit RGB without rounding.

    When whiteness and blackness add up to 1 or more the color is a gray
    ``w / (w + b)``. Otherwise the pure hue (HSL at full saturation, half
    lightness) is blended toward white and black.
    """
    if w + b >= 1:
        gray = w / (w + b)
        return gray, gray, gray

    scale = 1 - w - b
    red, green, blue = hsl_to_unit_rgb(h, 1.0, 0.5)
    return red * scale + w, green * scale + w, blue * scale + w


def np_hwb_to_unit_rgb(h: NDArray, w: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`hwb_to_unit_rgb`, returns an array of shape (..., 3)."""
    h, w, b = _broadcast(h, w, b)

    total = w + b
    is_gray = total >= 1
    gray = w / np.where(is_gray, total, 1.0)

    scale = 1 - w - b
    pure = np_hsl_to_unit_rgb(h, 1.0, 0.5)
    blended = pure * scale[..., None] + w[..., None]

    return np.where(is_gray[..., None], gray[..., None], blended)


def hwb_to_rgb(hwb: Hwb | Any) -> Rgb:
    """Convert HWB to RGB."""
    hue, whiteness, blackness = Hwb.coerce(hwb)
    return _scale_unit_rgb(*hwb_to_unit_rgb(hue, whiteness / PERCENT_MAX, blackness / PERCENT_MAX))
