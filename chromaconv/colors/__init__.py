"""
Chromaconv Color Values
=======================

Immutable value types for the five supported color models.

- ``Hex``: ``str`` subclass holding ``#rrggbb``
- ``Rgb``: named tuple (red, green, blue), integers in [0, 255]
- ``Hsl``: named tuple (hue, saturation, lightness)
- ``Hwb``: named tuple (hue, whiteness, blackness)
- ``Hsv``: named tuple (hue, saturation, value)

Hue lies in [0, 360), every other percentage in [0, 100]. Channels are
validated on construction; nothing is clamped.

>>> from chromaconv.colors import Rgb
>>> Rgb(64, 98, 115).convert("hsl")
Hsl(hue=200, saturation=28, lightness=35)
>>> Rgb(300, 0, 0)
Traceback (most recent call last):
    ...
chromaconv.errors.OutOfRangeChannel: rgb channel 'red' got 300: expected a value in [0, 255]
"""

from .color_base import ColorBase, ChannelColor
from .hex import Hex
from .rgb import Rgb
from .hsl import Hsl
from .hwb import Hwb
from .hsv import Hsv
from .registry import ColorValue, model_to_class, get_color_class, as_color

__all__ = [
    "ColorBase",
    "ChannelColor",
    "Hex",
    "Rgb",
    "Hsl",
    "Hwb",
    "Hsv",
    "ColorValue",
    "model_to_class",
    "get_color_class",
    "as_color",
]
