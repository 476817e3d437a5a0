import numpy as np
from numpy import ndarray as NDArray

from ..types.model_type import HUE_360


def unit_rgb_hue(r: float, g: float, b: float) -> float:
    """
    Hue shared by the HSL, HWB and HSV conversions.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Hue in degrees [0, 360), unrounded. 0 for achromatic colors.
    """
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    delta = max_c - min_c

    if delta == 0:
        return 0.0

    if max_c == r:
        fraction = ((g - b) / delta + (6 if g < b else 0)) / 6
    elif max_c == g:
        fraction = ((b - r) / delta + 2) / 6
    else:
        fraction = ((r - g) / delta + 4) / 6

    return (fraction * HUE_360) % HUE_360


def np_unit_rgb_hue(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """Vectorized :func:`unit_rgb_hue`, same arithmetic element-wise."""
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

    chromatic = delta != 0
    safe_delta = np.where(chromatic, delta, 1.0)

    # Red wins ties, then green
    mask_r = chromatic & (max_c == r)
    mask_g = chromatic & ~mask_r & (max_c == g)
    mask_b = chromatic & ~mask_r & ~mask_g

    fraction = np.zeros(out_shape)
    offset_r = np.where(g < b, 6.0, 0.0)
    fraction[mask_r] = (((g - b) / safe_delta + offset_r) / 6)[mask_r]
    fraction[mask_g] = (((b - r) / safe_delta + 2) / 6)[mask_g]
    fraction[mask_b] = (((r - g) / safe_delta + 4) / 6)[mask_b]

    return np.mod(fraction * HUE_360, HUE_360)
