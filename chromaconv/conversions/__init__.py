"""
Chromaconv Color Model Conversions
==================================

Conversions between HEX, RGB, HSL, HWB and HSV. RGB is the hub: every model
has a direct formula to and from RGB, and every other pair is routed
through it.

Conversion Functions
-------------------

Integer API (typed values in, typed values out, rounded once at the end):
    hex_to_rgb(hexadecimal) / rgb_to_hex(rgb)
    rgb_to_hsl(rgb) / hsl_to_rgb(hsl)
    rgb_to_hwb(rgb) / hwb_to_rgb(hwb)
    rgb_to_hsv(rgb) / hsv_to_rgb(hsv)

Unit kernels (floats, RGB in [0,1], hue in degrees, other channels in [0,1]):
    unit_rgb_to_hsl, unit_rgb_to_hwb, unit_rgb_to_hsv, unit_rgb_hue
    hsl_to_unit_rgb, hwb_to_unit_rgb, hsv_to_unit_rgb

Vectorized kernels (numpy arrays of any shape, results stacked on the last axis):
    np_unit_rgb_to_hsl, np_unit_rgb_to_hwb, np_unit_rgb_to_hsv, np_unit_rgb_hue
    np_hsl_to_unit_rgb, np_hwb_to_unit_rgb, np_hsv_to_unit_rgb

High-Level API
-------------
    convert(value, target, from_model=None)
        Any model to any model, direct or through RGB
    all_models(value, from_model=None)
        One color in all five models
    normalize(value)
        Any model to RGB
    np_convert(colors, from_model, to_model, rounded=True)
        Batch conversion between the numeric models

Other
-----
    color_brightness(rgb, exact=True)
        Relative luminance (or channel average) on the 0-255 scale

Examples
--------
>>> from chromaconv.conversions import convert, hex_to_rgb
>>> hex_to_rgb("#406273")
Rgb(red=64, green=98, blue=115)
>>> convert(hex_to_rgb("#406273"), "hwb")
Hwb(hue=200, whiteness=25, blackness=55)
>>> convert((200, 28, 35), "hex", from_model="hsl")
Hex('#406272')
"""

# HEX <-> RGB
from .to_hex import rgb_to_hex
from .to_rgb import hex_to_rgb

# RGB -> hue models
from .hue import unit_rgb_hue, np_unit_rgb_hue
from .to_hsl import rgb_to_hsl, unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .to_hwb import rgb_to_hwb, unit_rgb_to_hwb, np_unit_rgb_to_hwb
from .to_hsv import rgb_to_hsv, unit_rgb_to_hsv, np_unit_rgb_to_hsv

# Hue models -> RGB
from .to_rgb import (
    hsl_to_rgb,
    hsl_to_unit_rgb,
    np_hsl_to_unit_rgb,
    hwb_to_rgb,
    hwb_to_unit_rgb,
    np_hwb_to_unit_rgb,
    hsv_to_rgb,
    hsv_to_unit_rgb,
    np_hsv_to_unit_rgb,
)

from .brightness import color_brightness

# High-level API
from .wrapper import (
    CONVERT_DIRECT,
    FROM_RGB,
    TO_RGB,
    ColorModels,
    all_models,
    convert,
    normalize,
    np_convert,
)

__all__ = [
    # HEX <-> RGB
    'hex_to_rgb',
    'rgb_to_hex',

    # RGB -> hue models
    'unit_rgb_hue',
    'np_unit_rgb_hue',
    'rgb_to_hsl',
    'unit_rgb_to_hsl',
    'np_unit_rgb_to_hsl',
    'rgb_to_hwb',
    'unit_rgb_to_hwb',
    'np_unit_rgb_to_hwb',
    'rgb_to_hsv',
    'unit_rgb_to_hsv',
    'np_unit_rgb_to_hsv',

    # Hue models -> RGB
    'hsl_to_rgb',
    'hsl_to_unit_rgb',
    'np_hsl_to_unit_rgb',
    'hwb_to_rgb',
    'hwb_to_unit_rgb',
    'np_hwb_to_unit_rgb',
    'hsv_to_rgb',
    'hsv_to_unit_rgb',
    'np_hsv_to_unit_rgb',

    'color_brightness',

    # High-level API
    'CONVERT_DIRECT',
    'FROM_RGB',
    'TO_RGB',
    'ColorModels',
    'all_models',
    'convert',
    'normalize',
    'np_convert',
]
