"""Chromaconv: conversions between HEX, RGB, HSL, HWB and HSV colors."""

import logging

from .errors import (
    ConversionError,
    MalformedHex,
    OutOfRangeChannel,
    InvalidModel,
    UnsupportedTarget,
)
from .types.model_type import ColorModel
from .colors import (
    ColorBase,
    ColorValue,
    Hex,
    Rgb,
    Hsl,
    Hwb,
    Hsv,
    as_color,
)
from .conversions import (
    hex_to_rgb,
    rgb_to_hex,
    rgb_to_hsl,
    hsl_to_rgb,
    rgb_to_hwb,
    hwb_to_rgb,
    rgb_to_hsv,
    hsv_to_rgb,
    color_brightness,
    ColorModels,
    normalize,
    convert,
    all_models,
    np_convert,
)
# Binds ColorBase.convert / ColorBase.all_models
from .colors.color import color_convert, color_all_models

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # errors
    "ConversionError",
    "MalformedHex",
    "OutOfRangeChannel",
    "InvalidModel",
    "UnsupportedTarget",
    # color values
    "ColorModel",
    "ColorBase",
    "ColorValue",
    "Hex",
    "Rgb",
    "Hsl",
    "Hwb",
    "Hsv",
    "ColorModels",
    "as_color",
    "color_convert",
    "color_all_models",
    # conversions
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hwb",
    "hwb_to_rgb",
    "rgb_to_hsv",
    "hsv_to_rgb",
    "color_brightness",
    "normalize",
    "convert",
    "all_models",
    "np_convert",
    "__version__",
]
