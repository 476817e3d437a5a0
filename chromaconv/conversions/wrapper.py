from __future__ import annotations
import logging
from typing import Any, Callable, Dict, NamedTuple, Optional, Tuple

import numpy as np

from ..colors.hex import Hex
from ..colors.hsl import Hsl
from ..colors.hsv import Hsv
from ..colors.hwb import Hwb
from ..colors.registry import ColorValue, as_color, model_of
from ..colors.rgb import Rgb
from ..errors import InvalidModel, UnsupportedTarget
from ..types.color_types import ModelTag
from ..types.model_type import ColorModel, HUE_360, PERCENT_MAX, RGB_MAX, NUMERIC_MODELS, is_hue_model
from ..utils.num_utils import np_round_half_up
from ..utils.validation import check_array, check_model
from .to_hex import rgb_to_hex
from .to_hsl import rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hsv import rgb_to_hsv, np_unit_rgb_to_hsv
from .to_hwb import rgb_to_hwb, np_unit_rgb_to_hwb
from .to_rgb import (
    hex_to_rgb,
    hsl_to_rgb,
    hsv_to_rgb,
    hwb_to_rgb,
    np_hsl_to_unit_rgb,
    np_hsv_to_unit_rgb,
    np_hwb_to_unit_rgb,
)

logger = logging.getLogger(__name__)

# Pairs with a formula of their own; every other pair goes through RGB.
CONVERT_DIRECT: Dict[Tuple[ColorModel, ColorModel], Callable[[Any], ColorValue]] = {
    (ColorModel.HEX, ColorModel.RGB): hex_to_rgb,
    (ColorModel.RGB, ColorModel.HEX): rgb_to_hex,
    (ColorModel.RGB, ColorModel.HSL): rgb_to_hsl,
    (ColorModel.HSL, ColorModel.RGB): hsl_to_rgb,
    (ColorModel.RGB, ColorModel.HWB): rgb_to_hwb,
    (ColorModel.HWB, ColorModel.RGB): hwb_to_rgb,
    (ColorModel.RGB, ColorModel.HSV): rgb_to_hsv,
    (ColorModel.HSV, ColorModel.RGB): hsv_to_rgb,
}

TO_RGB: Dict[ColorModel, Callable[[Any], Rgb]] = {
    ColorModel.HEX: hex_to_rgb,
    ColorModel.RGB: Rgb.coerce,
    ColorModel.HSL: hsl_to_rgb,
    ColorModel.HWB: hwb_to_rgb,
    ColorModel.HSV: hsv_to_rgb,
}

FROM_RGB: Dict[ColorModel, Callable[[Rgb], ColorValue]] = {
    ColorModel.HEX: rgb_to_hex,
    ColorModel.RGB: Rgb.coerce,
    ColorModel.HSL: rgb_to_hsl,
    ColorModel.HWB: rgb_to_hwb,
    ColorModel.HSV: rgb_to_hsv,
}

# Unit kernels used by the batch path
NP_TO_UNIT_RGB = {
    ColorModel.HSL: np_hsl_to_unit_rgb,
    ColorModel.HWB: np_hwb_to_unit_rgb,
    ColorModel.HSV: np_hsv_to_unit_rgb,
}

NP_FROM_UNIT_RGB = {
    ColorModel.HSL: np_unit_rgb_to_hsl,
    ColorModel.HWB: np_unit_rgb_to_hwb,
    ColorModel.HSV: np_unit_rgb_to_hsv,
}


class ColorModels(NamedTuple):
    """One color expressed in all five models."""
    hex: Hex
    rgb: Rgb
    hsl: Hsl
    hwb: Hwb
    hsv: Hsv


def normalize(color: ColorValue) -> Rgb:
    """Convert any color value to RGB with its direct formula."""
    return TO_RGB[model_of(color)](color)


def convert(
    value: ColorValue | Any,
    target: ModelTag,
    *,
    from_model: Optional[ModelTag] = None,
) -> ColorValue:
    """
    Convert a color value to another model.

    Pairs listed in ``CONVERT_DIRECT`` use their own formula, every other
    pair is normalized to RGB first and converted from there.

    Args:
        value: A typed color value, or a raw payload when ``from_model`` is given
        target: Target model, a ``ColorModel`` or its name
        from_model: Model of a raw ``value``

    Raises:
        UnsupportedTarget: ``target`` is not one of the five models
        InvalidModel: ``value`` is not a color value, or ``from_model`` is unknown
    """
    to_model = check_model(target, UnsupportedTarget)
    color = as_color(value, from_model)
    source = model_of(color)

    if source == to_model:
        return color

    direct = CONVERT_DIRECT.get((source, to_model))
    if direct is not None:
        logger.debug("Converting %s -> %s directly", source.value, to_model.value)
        return direct(color)

    logger.debug("Converting %s -> %s through rgb", source.value, to_model.value)
    return FROM_RGB[to_model](normalize(color))


def all_models(value: ColorValue | Any, *, from_model: Optional[ModelTag] = None) -> ColorModels:
    """Express a color in all five models, normalizing to RGB only once."""
    rgb = normalize(as_color(value, from_model))
    return ColorModels(
        hex=rgb_to_hex(rgb),
        rgb=rgb,
        hsl=rgb_to_hsl(rgb),
        hwb=rgb_to_hwb(rgb),
        hsv=rgb_to_hsv(rgb),
    )

## Batch conversion

def _np_to_unit(colors: np.ndarray, model: ColorModel) -> np.ndarray:
    if not is_hue_model(model):
        return colors / RGB_MAX
    hue = colors[..., 0]
    a = colors[..., 1] / PERCENT_MAX
    b = colors[..., 2] / PERCENT_MAX
    return np.stack([hue, a, b], axis=-1)


def _np_from_unit(colors: np.ndarray, model: ColorModel) -> np.ndarray:
    if not is_hue_model(model):
        return colors * RGB_MAX
    hue = colors[..., 0]
    a = colors[..., 1] * PERCENT_MAX
    b = colors[..., 2] * PERCENT_MAX
    return np.stack([hue, a, b], axis=-1)


def _np_round(colors: np.ndarray, model: ColorModel) -> np.ndarray:
    rounded = np_round_half_up(colors)
    if is_hue_model(model):
        rounded[..., 0] %= HUE_360
    return rounded


def np_convert(
    colors: np.ndarray,
    from_model: ModelTag,
    to_model: ModelTag,
    *,
    rounded: bool = True,
) -> np.ndarray:
    """
    Vectorized conversion between the numeric models (RGB, HSL, HWB, HSV).

    Routing and rounding follow :func:`convert`: when neither side is RGB the
    intermediate RGB is rounded to integers before converting on.

    Args:
        colors: Array of shape (..., 3) in ``from_model`` units
        from_model: Source model
        to_model: Target model
        rounded: Round the result to integers. If False, floats in target units.
            Same-model input is returned validated but unrounded, like :func:`convert`.

    Returns:
        Array of shape (..., 3) in ``to_model`` units
    """
    source = check_model(from_model, InvalidModel)
    target = check_model(to_model, UnsupportedTarget)
    if source not in NUMERIC_MODELS:
        raise InvalidModel(source.value, f"Batch conversion does not support {source.value} input")
    if target not in NUMERIC_MODELS:
        raise UnsupportedTarget(target.value, f"Batch conversion does not support {target.value} output")

    arr = check_array(source, colors)
    logger.debug("Batch converting %s -> %s, shape %s", source.value, target.value, arr.shape)

    if source == target:
        return arr

    unit = _np_to_unit(arr, source)

    if source == ColorModel.RGB:
        unit_rgb = unit
    else:
        unit_rgb = NP_TO_UNIT_RGB[source](unit[..., 0], unit[..., 1], unit[..., 2])
        if target != ColorModel.RGB and rounded:
            # Match the scalar path, which routes through integer RGB
            unit_rgb = np_round_half_up(unit_rgb * RGB_MAX) / RGB_MAX

    if target == ColorModel.RGB:
        converted = unit_rgb
    else:
        converted = NP_FROM_UNIT_RGB[target](unit_rgb[..., 0], unit_rgb[..., 1], unit_rgb[..., 2])

    out = _np_from_unit(converted, target)
    return _np_round(out, target) if rounded else out
